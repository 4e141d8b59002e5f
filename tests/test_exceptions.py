"""Tests for the exception hierarchy."""

from product_report.exceptions import (
    ConfigurationError,
    FetchError,
    InvalidConfigError,
    ParseError,
    ProductReportError,
)


class TestProductReportError:
    def test_message_only(self):
        assert str(ProductReportError("boom")) == "boom"

    def test_details_appended(self):
        err = ProductReportError("boom", details={"a": "1", "b": "2"})
        assert str(err) == "boom (a=1, b=2)"


class TestFetchError:
    def test_generic_message_with_status(self):
        err = FetchError("https://example.test", "unexpected response status", status_code=404)
        assert err.message == "Error fetching data"
        assert err.details["status"] == "404"
        assert isinstance(err, ProductReportError)

    def test_without_status(self):
        err = FetchError("https://example.test", "request failed")
        assert "status" not in err.details


class TestParseError:
    def test_index_detail(self):
        err = ParseError("'price' must be a non-negative number", index=2)
        assert err.details == {"reason": "'price' must be a non-negative number", "index": "2"}


class TestInvalidConfigError:
    def test_is_configuration_error(self):
        err = InvalidConfigError("timeout_seconds", -1, "must be positive")
        assert isinstance(err, ConfigurationError)
        assert "timeout_seconds" in str(err)
