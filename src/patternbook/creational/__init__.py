"""
Creational Patterns
===================

Lessons about how objects get made.

Components:
    - simple_factory: RestaurantKind -> restaurant
    - factory_method: Delivery creators
    - abstract_factory: Veg / non-veg meal families
    - vehicles: Vehicle factory and prototype registry
    - builder: Fluent vehicle builder
    - app_config: Injected configuration object (Singleton redesign)
"""

from patternbook.creational.simple_factory import RestaurantKind, create_restaurant
from patternbook.creational.factory_method import DeliveryCreator
from patternbook.creational.abstract_factory import MealFactory, MealKind, meal_factory_for, prepare_meal
from patternbook.creational.vehicles import VehicleKind, VehicleRegistry, create_vehicle
from patternbook.creational.builder import CustomVehicle, VehicleBuilder
from patternbook.creational.app_config import AppConfig

__all__ = [
    "RestaurantKind",
    "create_restaurant",
    "DeliveryCreator",
    "MealFactory",
    "MealKind",
    "meal_factory_for",
    "prepare_meal",
    "VehicleKind",
    "VehicleRegistry",
    "create_vehicle",
    "CustomVehicle",
    "VehicleBuilder",
    "AppConfig",
]
