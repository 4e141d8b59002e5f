"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ReportConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    output_format: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
) -> ReportConfig:
    """Build config from CLI options."""
    overrides = {}
    if url is not None:
        overrides["api_url"] = url
    if timeout is not None:
        overrides["timeout_seconds"] = timeout
    if output_format is not None:
        overrides["output_format"] = output_format
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    if log_file is not None:
        overrides["log_file"] = log_file
    return load_config(config_file=config, **overrides)
