"""
Abstract Factory
================

Creates families of related products: a main course and a beverage
that always belong to the same meal type.

Components:
    - MainCourse, Beverage: Product interfaces
    - MealFactory: Abstract factory producing one of each
    - VegMealFactory, NonVegMealFactory: Concrete families
    - prepare_meal: Client code that works with any factory
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Protocol, Type, Union

from patternbook.errors import parse_choice


class MealKind(str, Enum):
    """Meal families."""

    VEG = "veg"
    NON_VEG = "non_veg"


class MainCourse(Protocol):
    def serve(self) -> str:
        ...


class Beverage(Protocol):
    def serve(self) -> str:
        ...


class VegMainCourse:
    def serve(self) -> str:
        return "Serving Paneer Butter Masala (Veg Main)."


class VegBeverage:
    def serve(self) -> str:
        return "Serving Mango Lassi (Veg Beverage)."


class NonVegMainCourse:
    def serve(self) -> str:
        return "Serving Butter Chicken (Non-Veg Main)."


class NonVegBeverage:
    def serve(self) -> str:
        return "Serving Masala Chai (Non-Veg Beverage)."


class MealFactory(ABC):
    """Abstract factory for one meal family."""

    @abstractmethod
    def create_main(self) -> MainCourse:
        ...

    @abstractmethod
    def create_beverage(self) -> Beverage:
        ...


class VegMealFactory(MealFactory):
    def create_main(self) -> MainCourse:
        return VegMainCourse()

    def create_beverage(self) -> Beverage:
        return VegBeverage()


class NonVegMealFactory(MealFactory):
    def create_main(self) -> MainCourse:
        return NonVegMainCourse()

    def create_beverage(self) -> Beverage:
        return NonVegBeverage()


MEAL_FACTORIES: Dict[MealKind, Type[MealFactory]] = {
    MealKind.VEG: VegMealFactory,
    MealKind.NON_VEG: NonVegMealFactory,
}


def meal_factory_for(kind: Union[MealKind, str]) -> MealFactory:
    """
    Get the factory for a meal family.

    Raises:
        ValidationError: If kind is not a known meal family.
    """
    return MEAL_FACTORIES[parse_choice(MealKind, kind, "meal type")]()


def prepare_meal(factory: MealFactory) -> str:
    """Serve a main course and beverage from the same family."""
    main = factory.create_main()
    beverage = factory.create_beverage()
    return f"{main.serve()} + {beverage.serve()}"


def main(settings=None) -> None:
    print(f"Veg Meal: {prepare_meal(meal_factory_for(MealKind.VEG))}")
    print(f"Non-Veg Meal: {prepare_meal(meal_factory_for(MealKind.NON_VEG))}")


if __name__ == "__main__":
    main()
