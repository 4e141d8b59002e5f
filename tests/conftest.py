"""Shared test fixtures for Product Report tests."""

from unittest.mock import MagicMock

import pytest
import requests

from product_report.models import Product


@pytest.fixture
def sample_payload():
    """Decoded JSON body as the endpoint returns it."""
    return [
        {
            "name": "Banana",
            "domestic": True,
            "price": 2,
            "description": "Yellow fruit from the tropics",
            "weight": 120,
        },
        {
            "name": "apple",
            "domestic": True,
            "price": 1.5,
            "description": "Red",
        },
        {
            "name": "Mango",
            "domestic": False,
            "price": 4.25,
            "description": "Imported from India",
            "weight": 300,
        },
    ]


@pytest.fixture
def sample_products(sample_payload):
    return [Product.from_dict(item) for item in sample_payload]


@pytest.fixture
def make_response():
    """Factory for fake ``requests.Response`` objects."""

    def _make(status_code=200, json_body=None, json_error=None):
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_body
        return response

    return _make


@pytest.fixture
def make_session():
    """Factory for fake ``requests.Session`` objects whose ``get`` is canned."""

    def _make(response=None, error=None):
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value = response
        return session

    return _make
