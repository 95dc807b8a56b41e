"""
Iterator Tests
==============

Inventory capacity and the three product iterators.
"""

import logging

import pytest


class TestProduct:
    """Product value object."""

    def test_str_format(self):
        from patternbook.behavioral.iterator import Product

        product = Product("P001", "Laptop", 899.99, "Electronics", 15)
        assert str(product) == "[P001] Laptop - $899.99 (Stock: 15, Category: Electronics)"

    def test_negative_price_rejected(self):
        from patternbook.behavioral.iterator import Product
        from patternbook.errors import ValidationError

        with pytest.raises(ValidationError):
            Product("P1", "Broken", -1.0, "Misc")


class TestInventory:
    """Capacity handling."""

    def test_add_beyond_capacity_returns_false(self, caplog):
        from patternbook.behavioral.iterator import Inventory, Product

        inventory = Inventory(max_items=2)
        assert inventory.add_product(Product("A", "a", 1.0, "x"))
        assert inventory.add_product(Product("B", "b", 1.0, "x"))

        with caplog.at_level(logging.WARNING, logger="patternbook.behavioral.iterator"):
            assert not inventory.add_product(Product("C", "c", 1.0, "x"))

        assert len(inventory) == 2
        assert inventory.is_full
        assert "Inventory full" in caplog.text

    def test_default_capacity(self):
        from patternbook.behavioral.iterator import Inventory

        assert Inventory().max_items == 100

    def test_capacity_from_settings(self):
        from patternbook.behavioral.iterator import Inventory
        from patternbook.config import Settings

        settings = Settings.model_validate({"inventory": {"max_items": 3}})
        assert Inventory.from_settings(settings).max_items == 3

    def test_zero_capacity_rejected(self):
        from patternbook.behavioral.iterator import Inventory
        from patternbook.errors import ValidationError

        with pytest.raises(ValidationError):
            Inventory(max_items=0)


class TestIterators:
    """has_next/reset and the Python iterator protocol."""

    def test_all_products_in_insertion_order(self, sample_inventory):
        ids = [product.id for product in sample_inventory.create_iterator()]
        assert ids == ["P001", "P002", "P003", "P004", "P005", "P006", "P007"]

    def test_category_is_case_insensitive(self, sample_inventory):
        ids = [p.id for p in sample_inventory.create_category_iterator("electronics")]
        assert ids == ["P001", "P002", "P005"]

    def test_unknown_category_is_empty(self, sample_inventory):
        iterator = sample_inventory.create_category_iterator("Toys")
        assert not iterator.has_next()
        assert list(iterator) == []

    def test_price_range_is_inclusive(self, sample_inventory):
        ids = [p.id for p in sample_inventory.create_price_range_iterator(45.0, 55.0)]
        assert ids == ["P003", "P006"]

    def test_price_range_demo_bounds(self, sample_inventory):
        ids = [p.id for p in sample_inventory.create_price_range_iterator(30.0, 100.0)]
        assert ids == ["P003", "P005", "P006", "P007"]

    def test_inverted_price_range_rejected(self, sample_inventory):
        from patternbook.errors import ValidationError

        with pytest.raises(ValidationError):
            sample_inventory.create_price_range_iterator(100.0, 30.0)

    def test_has_next_and_exhaustion(self, sample_inventory):
        iterator = sample_inventory.create_category_iterator("Furniture")
        seen = []
        while iterator.has_next():
            seen.append(next(iterator).id)

        assert seen == ["P004", "P007"]
        with pytest.raises(StopIteration):
            next(iterator)

    def test_reset_restarts_iteration(self, sample_inventory):
        iterator = sample_inventory.create_category_iterator("Books")
        assert next(iterator).id == "P003"
        iterator.reset()
        assert [p.id for p in iterator] == ["P003", "P006"]

    def test_iterator_is_snapshot(self):
        from patternbook.behavioral.iterator import Inventory, Product

        inventory = Inventory()
        inventory.add_product(Product("A", "a", 1.0, "x"))
        iterator = inventory.create_iterator()
        inventory.add_product(Product("B", "b", 1.0, "x"))
        assert [p.id for p in iterator] == ["A"]
