"""Base formatter interface for Product Report output rendering."""

from abc import ABC, abstractmethod
from typing import TextIO

from ..models import ProductReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, report: ProductReport, out: TextIO) -> None:
        """Write the formatted report to ``out``."""
        out.write(self.format(report))
        out.write("\n")

    @abstractmethod
    def format(self, report: ProductReport) -> str:
        """Return formatted string representation of the report."""
