"""
Behavioral Patterns
===================

Lessons about how objects collaborate.

Components:
    - strategy: Interchangeable payment methods
    - template_method: Fixed meal preparation with pluggable steps
    - observer: Stock price notifications
    - command: Light remote (with undo) and document menu
    - ride: Ride-hailing commands with undo history
    - chain: Order processing chain on LangGraph
    - iterator: Inventory iterators
"""

from patternbook.behavioral.strategy import Checkout, PaymentMethod, payment_strategy_for
from patternbook.behavioral.template_method import Recipe, prepare_meal
from patternbook.behavioral.observer import MobileApp, StockMarket, WebApp
from patternbook.behavioral.command import MenuOptions, RemoteControl
from patternbook.behavioral.ride import RideController, RideService, RideStatus
from patternbook.behavioral.chain import OrderProcessingChain, OrderReport, build_default_chain
from patternbook.behavioral.iterator import Inventory, Product

__all__ = [
    "Checkout",
    "PaymentMethod",
    "payment_strategy_for",
    "Recipe",
    "prepare_meal",
    "MobileApp",
    "StockMarket",
    "WebApp",
    "MenuOptions",
    "RemoteControl",
    "RideController",
    "RideService",
    "RideStatus",
    "OrderProcessingChain",
    "OrderReport",
    "build_default_chain",
    "Inventory",
    "Product",
]
