"""
Product Report - domestic vs. imported product listing

Fetches product records from a remote endpoint, splits them by origin, and
prints each group sorted by name with cost and count summaries.
"""

__version__ = "0.1.0"

from .catalog import (
    calculate_total_cost,
    filter_products,
    partition_products,
    sort_products_alphabetically,
)
from .client import ProductClient, fetch_products
from .config import ReportConfig, load_config
from .exceptions import FetchError, ParseError, ProductReportError
from .formatting import format_price, format_product
from .models import Product, ProductGroup, ProductReport
from .report import build_report, render_report, run

__all__ = [
    "run",  # Main entry point
    "build_report",
    "render_report",
    "fetch_products",
    "ProductClient",
    "filter_products",
    "partition_products",
    "sort_products_alphabetically",
    "calculate_total_cost",
    "format_price",
    "format_product",
    "Product",
    "ProductGroup",
    "ProductReport",
    "ReportConfig",
    "load_config",
    "ProductReportError",
    "FetchError",
    "ParseError",
]
