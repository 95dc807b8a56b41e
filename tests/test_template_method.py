"""
Template Method Tests
=====================

prepare_meal runs the same sequence for any recipe.
"""


class TestPrepareMeal:
    """Invariant sequence with pluggable steps."""

    def test_step_order(self):
        from patternbook.behavioral.template_method import PizzaRecipe, prepare_meal

        steps = prepare_meal(PizzaRecipe())
        assert steps == [
            "Quality check for Margherita Pizza",
            "Gathering dough, tomato sauce and mozzarella",
            "Baking in a wood-fired oven for 90 seconds",
            "Garnishing with fresh basil",
            "Slicing into 8 pieces on a wooden board",
            "Packing Margherita Pizza for delivery",
        ]

    def test_garnish_skipped_when_none(self):
        from patternbook.behavioral.template_method import SaladRecipe, prepare_meal

        steps = prepare_meal(SaladRecipe())
        assert len(steps) == 5
        assert not any(step.startswith("Garnishing") for step in steps)

    def test_any_object_with_the_steps_is_a_recipe(self):
        from patternbook.behavioral.template_method import prepare_meal

        class Dosa:
            name = "Masala Dosa"
            garnish = "coriander"

            def gather_ingredients(self):
                return "gather"

            def cook(self):
                return "cook"

            def plate(self):
                return "plate"

        steps = prepare_meal(Dosa())
        assert steps[0] == "Quality check for Masala Dosa"
        assert steps[1:5] == ["gather", "cook", "Garnishing with coriander", "plate"]
        assert steps[-1] == "Packing Masala Dosa for delivery"
