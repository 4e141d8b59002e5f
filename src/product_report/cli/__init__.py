"""CLI entry point."""

import typer

app = typer.Typer(
    name="product-report",
    help="Product Report - domestic and imported product listing",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .report import main as _main_callback  # noqa: F401, E402
