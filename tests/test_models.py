"""Tests for Product parsing and serialization."""

import dataclasses

import pytest

from product_report.exceptions import ParseError
from product_report.models import Product, ProductGroup, ProductReport


def _record(**changes):
    data = {"name": "Kiwi", "domestic": False, "price": 3.0, "description": "Green"}
    data.update(changes)
    return data


class TestProductFromDict:
    def test_required_fields(self):
        product = Product.from_dict(_record())
        assert product.name == "Kiwi"
        assert product.domestic is False
        assert product.price == 3.0
        assert product.description == "Green"

    def test_missing_weight_is_none(self):
        assert Product.from_dict(_record()).weight is None

    def test_null_weight_is_none(self):
        assert Product.from_dict(_record(weight=None)).weight is None

    def test_zero_weight_is_kept(self):
        assert Product.from_dict(_record(weight=0)).weight == 0

    def test_extra_fields_ignored(self):
        assert Product.from_dict(_record(sku="X-1")).name == "Kiwi"

    @pytest.mark.parametrize("field", ["name", "domestic", "price", "description"])
    def test_missing_required_field_raises(self, field):
        data = _record()
        del data[field]
        with pytest.raises(ParseError):
            Product.from_dict(data)

    def test_empty_name_raises(self):
        with pytest.raises(ParseError, match="name"):
            Product.from_dict(_record(name=""))

    def test_non_boolean_domestic_raises(self):
        with pytest.raises(ParseError, match="domestic"):
            Product.from_dict(_record(domestic="yes"))

    def test_boolean_price_raises(self):
        with pytest.raises(ParseError, match="price"):
            Product.from_dict(_record(price=True))

    def test_negative_price_raises(self):
        with pytest.raises(ParseError, match="price"):
            Product.from_dict(_record(price=-1))

    def test_string_weight_raises(self):
        with pytest.raises(ParseError, match="weight"):
            Product.from_dict(_record(weight="200g"))

    def test_non_object_raises_with_index(self):
        with pytest.raises(ParseError) as exc_info:
            Product.from_dict(["Kiwi"], index=3)
        assert exc_info.value.index == 3
        assert "index=3" in str(exc_info.value)


class TestProduct:
    def test_is_immutable(self):
        product = Product.from_dict(_record())
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.price = 10

    def test_to_dict_omits_absent_weight(self):
        assert "weight" not in Product.from_dict(_record()).to_dict()

    def test_to_dict_includes_weight(self):
        assert Product.from_dict(_record(weight=250)).to_dict()["weight"] == 250


class TestProductGroup:
    def test_summary_derived_from_products(self):
        product = Product.from_dict(_record(price=2.0))
        group = ProductGroup("Domestic", (product,))
        assert group.count == 1
        assert group.total_cost == product.price

    def test_empty_group(self):
        group = ProductGroup("Imported")
        assert group.count == 0
        assert group.total_cost == 0

    def test_report_total_count(self):
        a = Product.from_dict(_record(name="a", domestic=True))
        b = Product.from_dict(_record(name="b"))
        c = Product.from_dict(_record(name="c"))
        report = ProductReport(ProductGroup("Domestic", (a,)), ProductGroup("Imported", (b, c)))
        assert report.total_count == 3
