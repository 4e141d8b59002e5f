"""Data models for Product Report"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import ParseError


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid price or weight
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Product:
    """A single product record as returned by the remote endpoint.

    ``weight`` is ``None`` when the source omits it ("not applicable"),
    which is distinct from a weight of zero.
    """

    name: str
    domestic: bool
    price: float
    description: str
    weight: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any, index: Optional[int] = None) -> "Product":
        """Build a Product from one decoded JSON object.

        Raises:
            ParseError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, Mapping):
            raise ParseError(f"expected an object, got {type(data).__name__}", index=index)

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ParseError("'name' must be a non-empty string", index=index)

        domestic = data.get("domestic")
        if not isinstance(domestic, bool):
            raise ParseError("'domestic' must be a boolean", index=index)

        price = data.get("price")
        if not _is_number(price) or not math.isfinite(price) or price < 0:
            raise ParseError("'price' must be a non-negative number", index=index)

        description = data.get("description")
        if not isinstance(description, str):
            raise ParseError("'description' must be a string", index=index)

        weight = data.get("weight")
        if weight is not None and (not _is_number(weight) or not math.isfinite(weight)):
            raise ParseError("'weight' must be a number when present", index=index)

        return cls(
            name=name,
            domestic=domestic,
            price=price,
            description=description,
            weight=weight,
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "name": self.name,
            "domestic": self.domestic,
            "price": self.price,
            "description": self.description,
        }
        if self.weight is not None:
            d["weight"] = self.weight
        return d


@dataclass(frozen=True)
class ProductGroup:
    """Products sharing an origin, in display order.

    ``total_cost`` and ``count`` are always derived from ``products``.
    """

    label: str
    products: Tuple[Product, ...] = ()

    @property
    def total_cost(self) -> float:
        from .catalog import calculate_total_cost

        return calculate_total_cost(self.products)

    @property
    def count(self) -> int:
        from .catalog import count_products

        return count_products(self.products)


@dataclass(frozen=True)
class ProductReport:
    """Domestic and imported groups built from one fetch."""

    domestic: ProductGroup
    imported: ProductGroup

    @property
    def total_count(self) -> int:
        return self.domestic.count + self.imported.count
