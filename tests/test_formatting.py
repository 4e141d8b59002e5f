"""Tests for monetary, weight and product block formatting."""

import pytest

from product_report.formatting import (
    format_price,
    format_product,
    format_weight,
    truncate_description,
)
from product_report.models import Product


class TestFormatPrice:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (12, "12,0"),
            (12.0, "12,0"),
            (12.5, "12,5"),
            (12.34, "12,3"),
            (12.04, "12,0"),
            (0, "0,0"),
            (15.5, "15,5"),
            (1234567.89, "1234567,9"),
        ],
    )
    def test_one_fractional_digit_with_comma(self, value, expected):
        assert format_price(value) == expected

    def test_exact_ties_round_up(self):
        # 0.25 and 4.25 are exactly representable
        assert format_price(0.25) == "0,3"
        assert format_price(4.25) == "4,3"

    def test_rounds_stored_binary_value(self):
        # 12.05 is stored just above the tie, 0.35 and 1.45 just below
        assert format_price(12.05) == "12,1"
        assert format_price(0.35) == "0,3"
        assert format_price(1.45) == "1,4"

    def test_float_sums_round_cleanly(self):
        assert format_price(0.1 + 0.2) == "0,3"
        assert format_price(1.1 + 2.2) == "3,3"

    def test_rounds_up_to_integer(self):
        assert format_price(9.96) == "10,0"


class TestFormatWeight:
    def test_absent(self):
        assert format_weight(None) == "N/A"

    def test_integral(self):
        assert format_weight(250) == "250g"
        assert format_weight(250.0) == "250g"

    def test_zero_is_not_absent(self):
        assert format_weight(0) == "0g"

    def test_fractional_natural_form(self):
        assert format_weight(12.5) == "12.5g"


class TestTruncateDescription:
    def test_long_truncated_to_ten(self):
        assert truncate_description("Yellow fruit") == "Yellow fru"

    def test_exactly_ten(self):
        assert truncate_description("0123456789") == "0123456789"

    def test_short_kept_without_padding(self):
        assert truncate_description("Red") == "Red"


class TestFormatProduct:
    def test_block_with_weight(self):
        product = Product(
            name="Banana",
            domestic=True,
            price=2,
            description="Yellow fruit",
            weight=120,
        )
        assert format_product(product) == [
            "... Banana",
            "   Price: $2,0",
            "   Yellow fru...",
            "   Weight: 120g",
        ]

    def test_block_without_weight(self):
        product = Product(name="apple", domestic=True, price=1.5, description="Red")
        assert format_product(product) == [
            "... apple",
            "   Price: $1,5",
            "   Red...",
            "   Weight: N/A",
        ]

    def test_name_case_preserved(self):
        product = Product(name="iPhone CASE", domestic=False, price=9.99, description="")
        assert format_product(product)[0] == "... iPhone CASE"
