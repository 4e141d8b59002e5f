"""Text formatting for product report lines.

Monetary values use one fractional digit and a comma as the decimal
separator. Rounding is half-up on the exact binary value of the float, the
same result as JavaScript's ``Number.prototype.toFixed(1)``: ``12.05`` is
stored slightly above .05 and renders as ``12,1``, while ``0.35`` is stored
slightly below and renders as ``0,3``.

Item detail lines are indented by exactly three spaces; no separator space
follows the indent, so ``Price:``, the description and ``Weight:`` start in
column four, not five.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from .models import Product

INDENT = " " * 3
MARKER = "." * 3
DESCRIPTION_WIDTH = 10
NOT_APPLICABLE = "N/A"

_ONE_PLACE = Decimal("0.1")


def round_price(value: float) -> Decimal:
    """Round a monetary value to one fractional digit, half-up."""
    return Decimal(value).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)


def format_price(value: float) -> str:
    """Format a monetary value as ``<int>,<digit>`` without grouping."""
    return f"{round_price(value):f}".replace(".", ",")


def format_weight(weight: Optional[float]) -> str:
    """Render a weight in grams, or ``N/A`` when absent."""
    if weight is None:
        return NOT_APPLICABLE
    if float(weight).is_integer():
        return f"{int(weight)}g"
    return f"{weight!r}g"


def truncate_description(description: str, width: int = DESCRIPTION_WIDTH) -> str:
    return description[:width]


def format_product(product: Product) -> List[str]:
    """Return the four display lines for one product."""
    return [
        f"{MARKER} {product.name}",
        f"{INDENT}Price: ${format_price(product.price)}",
        f"{INDENT}{truncate_description(product.description)}{MARKER}",
        f"{INDENT}Weight: {format_weight(product.weight)}",
    ]
