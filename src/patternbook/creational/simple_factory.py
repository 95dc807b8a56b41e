"""
Simple Factory
==============

One central function decides which restaurant object to create.

The discriminator is a closed RestaurantKind enum. Strings are parsed
at the boundary, so a misspelled kind fails immediately with
ValidationError instead of surfacing later.
"""

from enum import Enum
from typing import Dict, Protocol, Type, Union

from patternbook.errors import parse_choice


class RestaurantKind(str, Enum):
    """Restaurants the factory can create."""

    PIZZA = "pizza"
    BURGER = "burger"
    SUSHI = "sushi"


class Restaurant(Protocol):
    """Anything that can prepare a dish."""

    def prepare_order(self, dish_name: str) -> str:
        ...


class PizzaCorner:
    def prepare_order(self, dish_name: str) -> str:
        return f"PizzaCorner preparing {dish_name} with extra cheese."


class BurgerHouse:
    def prepare_order(self, dish_name: str) -> str:
        return f"BurgerHouse preparing {dish_name} with fries."


class SushiExpress:
    def prepare_order(self, dish_name: str) -> str:
        return f"SushiExpress preparing {dish_name} with wasabi."


RESTAURANTS: Dict[RestaurantKind, Type[Restaurant]] = {
    RestaurantKind.PIZZA: PizzaCorner,
    RestaurantKind.BURGER: BurgerHouse,
    RestaurantKind.SUSHI: SushiExpress,
}


def create_restaurant(kind: Union[RestaurantKind, str]) -> Restaurant:
    """
    Create a restaurant by kind.

    Args:
        kind: RestaurantKind or its string value (case-insensitive)

    Raises:
        ValidationError: If kind is not a known restaurant.
    """
    return RESTAURANTS[parse_choice(RestaurantKind, kind, "restaurant type")]()


def main(settings=None) -> None:
    print(create_restaurant("pizza").prepare_order("Margherita"))
    print(create_restaurant("burger").prepare_order("Classic Burger"))


if __name__ == "__main__":
    main()
