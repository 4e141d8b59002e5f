"""Partitioning, ordering and aggregation over product lists."""

from typing import Iterable, List, Sequence, Tuple

from .models import Product


def filter_products(products: Iterable[Product], is_domestic: bool) -> List[Product]:
    """Return products whose origin flag equals ``is_domestic``, in input order."""
    return [product for product in products if product.domestic is is_domestic]


def partition_products(products: Sequence[Product]) -> Tuple[List[Product], List[Product]]:
    """Split products into ``(domestic, imported)``.

    Every product lands in exactly one of the two lists.
    """
    domestic = filter_products(products, True)
    imported = filter_products(products, False)
    return domestic, imported


def sort_products_alphabetically(products: Iterable[Product]) -> List[Product]:
    """Return a new list ordered by case-insensitive name.

    ``sorted`` is guaranteed stable, so products whose lower-cased names
    compare equal keep their relative input order.
    """
    return sorted(products, key=lambda product: product.name.lower())


def calculate_total_cost(products: Iterable[Product]) -> float:
    """Sum prices left to right, starting from 0."""
    total = 0.0
    for product in products:
        total += product.price
    return total


def count_products(products: Sequence[Product]) -> int:
    return len(products)
