"""JSON formatter for Product Report."""

import json

from ..formatting import round_price
from ..models import ProductGroup, ProductReport
from .base import BaseFormatter


def _group_to_dict(group: ProductGroup) -> dict:
    return {
        "products": [p.to_dict() for p in group.products],
        # Same one-digit rounding as the text report
        "cost": float(round_price(group.total_cost)),
        "count": group.count,
    }


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def format(self, report: ProductReport) -> str:
        data = {
            "domestic": _group_to_dict(report.domestic),
            "imported": _group_to_dict(report.imported),
        }
        return json.dumps(data, indent=2)
