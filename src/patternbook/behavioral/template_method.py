"""
Template Method (redesigned)
============================

A fixed preparation sequence with pluggable steps.

Rather than an abstract base class with a final template method,
Recipe is a Protocol that lists only the steps that vary. The
invariant sequence lives once, in prepare_meal():

    quality check -> gather ingredients -> cook -> garnish? -> plate -> pack

Any object with the right methods is a recipe; no inheritance needed.
"""

import logging
from typing import List, Optional, Protocol


logger = logging.getLogger(__name__)


class Recipe(Protocol):
    """
    The varying steps of a meal.

    Attributes:
        name: Dish name used in the invariant steps
        garnish: Garnish to add, or None to skip the step
    """

    name: str
    garnish: Optional[str]

    def gather_ingredients(self) -> str:
        ...

    def cook(self) -> str:
        ...

    def plate(self) -> str:
        ...


class PizzaRecipe:
    name = "Margherita Pizza"
    garnish = "fresh basil"

    def gather_ingredients(self) -> str:
        return "Gathering dough, tomato sauce and mozzarella"

    def cook(self) -> str:
        return "Baking in a wood-fired oven for 90 seconds"

    def plate(self) -> str:
        return "Slicing into 8 pieces on a wooden board"


class BiryaniRecipe:
    name = "Chicken Biryani"
    garnish = "fried onions"

    def gather_ingredients(self) -> str:
        return "Gathering basmati rice, marinated chicken and whole spices"

    def cook(self) -> str:
        return "Slow-cooking on dum for 40 minutes"

    def plate(self) -> str:
        return "Serving in a clay handi with raita"


class SaladRecipe:
    name = "Garden Salad"
    garnish = None

    def gather_ingredients(self) -> str:
        return "Gathering lettuce, cucumber and cherry tomatoes"

    def cook(self) -> str:
        return "No cooking required, tossing with dressing"

    def plate(self) -> str:
        return "Serving in a chilled bowl"


def prepare_meal(recipe: Recipe) -> List[str]:
    """
    Run the fixed preparation sequence for a recipe.

    Args:
        recipe: Supplies the varying steps

    Returns:
        Step descriptions in the order they were performed.
    """
    steps = [f"Quality check for {recipe.name}"]
    steps.append(recipe.gather_ingredients())
    steps.append(recipe.cook())
    if recipe.garnish is not None:
        steps.append(f"Garnishing with {recipe.garnish}")
    steps.append(recipe.plate())
    steps.append(f"Packing {recipe.name} for delivery")

    logger.debug(f"Prepared {recipe.name} in {len(steps)} steps")
    return steps


def main(settings=None) -> None:
    for recipe in (PizzaRecipe(), BiryaniRecipe(), SaladRecipe()):
        print(f"--- {recipe.name} ---")
        for step in prepare_meal(recipe):
            print(f"  {step}")


if __name__ == "__main__":
    main()
