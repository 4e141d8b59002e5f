"""Plain text formatter, the default report layout."""

from ..models import ProductReport
from ..report import render_report
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Render group headers, product blocks, then costs and counts."""

    def format(self, report: ProductReport) -> str:
        return "\n".join(render_report(report))
