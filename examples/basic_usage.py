#!/usr/bin/env python3
"""
Example: Basic usage of Product Report as a Python library
"""

from product_report import build_report, fetch_products, format_price
from product_report.config import DEFAULT_API_URL

products = fetch_products(DEFAULT_API_URL, timeout=5)
report = build_report(products)

for group in (report.domestic, report.imported):
    print(f"{group.label}: {group.count} item(s), ${format_price(group.total_cost)}")
    for product in group.products:
        weight = f"{product.weight}g" if product.weight is not None else "N/A"
        print(f"  - {product.name} ({weight})")

print(f"Report complete: {report.total_count} product(s)")
