"""Main report command."""

import sys
from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..exceptions import ProductReportError
from ..logging_config import get_logger, setup_logging
from ..report import run
from . import app
from ._common import console, err_console, resolve_config


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="Product endpoint (default: built-in address)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Request timeout in seconds",
        min=0.1,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text | json",
        click_type=click.Choice(["text", "json"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Fetch products and print them grouped by origin.

    Domestic and imported products are listed alphabetically, followed by
    the total cost and item count of each group.

    [bold cyan]Examples:[/bold cyan]

      product-report

      product-report --format json

      product-report --url https://example.com/products.json --timeout 5
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]Product Report[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = get_logger()

    try:
        settings = resolve_config(
            config=config,
            url=url,
            timeout=timeout,
            output_format=output_format.lower() if output_format else None,
            verbose=verbose,
            quiet=quiet,
            log_file=str(log_file) if log_file else None,
        )
        logger = setup_logging(settings.verbosity, log_file=settings.log_file)

        run(settings, out=sys.stdout)

    except ProductReportError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Report interrupted by user")
        err_console.print("\n[yellow]Report interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error while building report")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
