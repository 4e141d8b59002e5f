"""Data source exceptions: fetching and parsing product records."""

from typing import Dict, Optional

from .base import ProductReportError


class DataSourceError(ProductReportError):
    """Base class for errors raised while acquiring product data."""

    pass


class FetchError(DataSourceError):
    """Raised when the remote endpoint does not return a success response."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        details: Dict[str, str] = {"url": url, "reason": reason}
        if status_code is not None:
            details["status"] = str(status_code)

        super().__init__("Error fetching data", details=details)
        self.url = url
        self.reason = reason
        self.status_code = status_code


class ParseError(DataSourceError):
    """Raised when a response body is not a JSON array of product records."""

    def __init__(self, reason: str, index: Optional[int] = None):
        details: Dict[str, str] = {"reason": reason}
        if index is not None:
            details["index"] = str(index)

        super().__init__("Error parsing product data", details=details)
        self.reason = reason
        self.index = index
