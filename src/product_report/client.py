"""
Product data client.

Performs the single HTTP GET against the product endpoint and turns the JSON
array body into Product records. There is no retry: one failed attempt ends
the run.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests

from .exceptions import FetchError, ParseError
from .logging_config import get_logger
from .models import Product

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


def parse_products(payload: Any) -> List[Product]:
    """Validate a decoded JSON value into a list of products.

    Raises:
        ParseError: If the payload is not an array of product objects
    """
    if not isinstance(payload, list):
        raise ParseError(f"expected a JSON array, got {type(payload).__name__}")
    return [Product.from_dict(item, index=i) for i, item in enumerate(payload)]


class ProductClient:
    """
    HTTP client for the product endpoint.

    Wraps a ``requests.Session`` so callers (and tests) can supply their own.
    Usable as a context manager; the session is closed on exit only when the
    client created it.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def fetch(self) -> List[Product]:
        """
        Retrieve and parse all products.

        Returns:
            Products in the order the endpoint returned them

        Raises:
            FetchError: On transport failure or a non-200 status
            ParseError: If the body is not a JSON array of product records
        """
        logger.debug(f"Requesting products from {self.url}")
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(self.url, f"request failed: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                self.url, "unexpected response status", status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"response body is not valid JSON: {e}") from e

        products = parse_products(payload)
        logger.info(f"Fetched {len(products)} products")
        return products

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ProductClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def fetch_products(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> List[Product]:
    """Fetch products from ``url`` with a single GET."""
    with ProductClient(url, timeout=timeout, session=session) as client:
        return client.fetch()
