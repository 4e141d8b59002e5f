"""Exception hierarchy for Product Report."""

from .base import ProductReportError
from .config import ConfigurationError, InvalidConfigError
from .data import DataSourceError, FetchError, ParseError

__all__ = [
    "ProductReportError",
    "DataSourceError",
    "FetchError",
    "ParseError",
    "ConfigurationError",
    "InvalidConfigError",
]
