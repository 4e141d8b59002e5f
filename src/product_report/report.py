"""Report pipeline: fetch, partition, order, aggregate, render."""

import sys
from typing import List, Optional, Sequence, TextIO

from .catalog import partition_products, sort_products_alphabetically
from .client import fetch_products
from .config import ReportConfig
from .formatting import format_price, format_product
from .logging_config import get_logger
from .models import Product, ProductGroup, ProductReport

logger = get_logger(__name__)

DOMESTIC_LABEL = "Domestic"
IMPORTED_LABEL = "Imported"


def _build_group(label: str, products: Sequence[Product]) -> ProductGroup:
    return ProductGroup(label=label, products=tuple(sort_products_alphabetically(products)))


def build_report(products: Sequence[Product]) -> ProductReport:
    """Partition products by origin and sort each group by name."""
    domestic, imported = partition_products(products)
    logger.debug(f"Partitioned {len(products)} products: {len(domestic)} domestic, {len(imported)} imported")
    return ProductReport(
        domestic=_build_group(DOMESTIC_LABEL, domestic),
        imported=_build_group(IMPORTED_LABEL, imported),
    )


def render_group(group: ProductGroup) -> List[str]:
    lines = [f". {group.label}"]
    for product in group.products:
        lines.extend(format_product(product))
    return lines


def render_report(report: ProductReport) -> List[str]:
    """Return every output line of the text report, in display order."""
    lines = render_group(report.domestic) + render_group(report.imported)
    lines.append(f"Domestic cost: ${format_price(report.domestic.total_cost)}")
    lines.append(f"Imported cost: ${format_price(report.imported.total_cost)}")
    lines.append(f"Domestic count: {report.domestic.count}")
    lines.append(f"Imported count: {report.imported.count}")
    return lines


def run(config: ReportConfig, out: Optional[TextIO] = None) -> ProductReport:
    """Fetch products and write the report.

    Nothing is written to ``out`` unless the fetch succeeds.

    Raises:
        FetchError: If the endpoint call fails
        ParseError: If the response is not a list of products
    """
    from .formatters import get_formatter

    formatter = get_formatter(config.output_format)
    products = fetch_products(config.api_url, timeout=config.timeout_seconds)
    report = build_report(products)
    formatter.render(report, out if out is not None else sys.stdout)
    return report
