"""
Iterator
========

Walking an inventory without exposing how it stores products.

Components:
    - Product: immutable catalogue entry
    - ProductIterator: every product, insertion order
    - CategoryIterator: products of one category (case-insensitive)
    - PriceRangeIterator: products priced within [min_price, max_price]
    - Inventory: bounded aggregate that hands out iterators

Each iterator supports has_next()/reset() as well as the Python
iterator protocol, so both of these work:

    it = inventory.create_iterator()
    while it.has_next():
        print(next(it))

    for product in inventory.create_category_iterator("books"):
        ...

Iterators work on the products present when they were created.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from patternbook.config import Settings
from patternbook.errors import ValidationError


logger = logging.getLogger(__name__)


DEFAULT_MAX_ITEMS = 100


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    price: float
    category: str
    stock: int = 0

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValidationError(f"Product {self.id} has negative price {self.price}")
        if self.stock < 0:
            raise ValidationError(f"Product {self.id} has negative stock {self.stock}")

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} - ${self.price:.2f} (Stock: {self.stock}, Category: {self.category})"


class ProductIterator:
    """Iterates products that satisfy a predicate; the base iterator accepts all."""

    def __init__(
        self,
        products: Sequence[Product],
        predicate: Optional[Callable[[Product], bool]] = None,
    ) -> None:
        self._products = tuple(products)
        self._predicate = predicate or (lambda product: True)
        self._position = 0

    def has_next(self) -> bool:
        while self._position < len(self._products):
            if self._predicate(self._products[self._position]):
                return True
            self._position += 1
        return False

    def __next__(self) -> Product:
        if not self.has_next():
            raise StopIteration
        product = self._products[self._position]
        self._position += 1
        return product

    def __iter__(self) -> Iterator[Product]:
        return self

    def reset(self) -> None:
        self._position = 0


class CategoryIterator(ProductIterator):
    def __init__(self, products: Sequence[Product], category: str) -> None:
        self.category = category
        wanted = category.casefold()
        super().__init__(products, lambda product: product.category.casefold() == wanted)


class PriceRangeIterator(ProductIterator):
    def __init__(self, products: Sequence[Product], min_price: float, max_price: float) -> None:
        if min_price > max_price:
            raise ValidationError(f"Invalid price range: {min_price} > {max_price}")
        self.min_price = min_price
        self.max_price = max_price
        super().__init__(products, lambda product: min_price <= product.price <= max_price)


class Inventory:
    """
    Bounded product collection.

    Attributes:
        max_items: Capacity; adds beyond it are rejected
    """

    def __init__(self, max_items: int = DEFAULT_MAX_ITEMS) -> None:
        if max_items < 1:
            raise ValidationError(f"Inventory capacity must be at least 1, got {max_items}")
        self.max_items = max_items
        self._products: List[Product] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "Inventory":
        return cls(max_items=settings.inventory.max_items)

    @property
    def is_full(self) -> bool:
        return len(self._products) >= self.max_items

    def add_product(self, product: Product) -> bool:
        """
        Add a product if there is room.

        Returns:
            True if added, False if the inventory is full.
        """
        if self.is_full:
            logger.warning(f"Inventory full ({self.max_items} items), dropping {product.id}")
            return False
        self._products.append(product)
        return True

    def __len__(self) -> int:
        return len(self._products)

    def create_iterator(self) -> ProductIterator:
        return ProductIterator(self._products)

    def create_category_iterator(self, category: str) -> CategoryIterator:
        return CategoryIterator(self._products, category)

    def create_price_range_iterator(self, min_price: float, max_price: float) -> PriceRangeIterator:
        return PriceRangeIterator(self._products, min_price, max_price)


SAMPLE_PRODUCTS = (
    Product("P001", "Laptop", 899.99, "Electronics", 15),
    Product("P002", "Wireless Mouse", 29.99, "Electronics", 50),
    Product("P003", "Java Programming Book", 45.00, "Books", 30),
    Product("P004", "Office Chair", 199.99, "Furniture", 20),
    Product("P005", "Mechanical Keyboard", 89.99, "Electronics", 25),
    Product("P006", "Design Patterns Book", 55.00, "Books", 18),
    Product("P007", "Desk Lamp", 34.99, "Furniture", 40),
)


def main(settings: Optional[Settings] = None) -> None:
    inventory = Inventory.from_settings(settings) if settings else Inventory()
    for product in SAMPLE_PRODUCTS:
        inventory.add_product(product)

    print("========== ALL PRODUCTS ==========")
    products = inventory.create_iterator()
    while products.has_next():
        print(next(products))

    print("========== ELECTRONICS ONLY ==========")
    for product in inventory.create_category_iterator("Electronics"):
        print(product)

    print("========== PRODUCTS $30-$100 ==========")
    for product in inventory.create_price_range_iterator(30.0, 100.0):
        print(product)

    print("========== BOOKS (with reset) ==========")
    books = inventory.create_category_iterator("books")
    print(f"First book: {next(books)}")
    books.reset()
    print(f"Books after reset: {sum(1 for _ in books)}")


if __name__ == "__main__":
    main()
