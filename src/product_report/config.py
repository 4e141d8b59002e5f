"""Configuration loading and management for Product Report.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Project config (./product-report.toml)
    3. Explicit config file (--config)
    4. Environment variables (PRODUCT_REPORT_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, timeout_seconds=5)
    >>> config.verbosity
    'verbose'
    >>> config.timeout_seconds
    5
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json"]

DEFAULT_API_URL = "https://interview-task-api.mca.dev/qr-scanner-codes/alpha-qr-gFpwhsQ8fkY1"
PROJECT_CONFIG_NAME = "product-report.toml"
ENV_PREFIX = "PRODUCT_REPORT_"

_VERBOSITIES = ("quiet", "normal", "verbose")
_OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one report run.

    Attributes:
        api_url: Endpoint returning the JSON array of products
        timeout_seconds: Timeout for the single HTTP request
        output_format: Report renderer ("text" or "json")
        verbosity: Logging verbosity level
        log_file: Optional file that also receives log records
    """

    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = 10.0
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.api_url, str) or not self.api_url.startswith(
            ("http://", "https://")
        ):
            raise InvalidConfigError("api_url", self.api_url, "must be an http(s) URL")
        if isinstance(self.timeout_seconds, bool) or not isinstance(
            self.timeout_seconds, (int, float)
        ):
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be a number")
        if self.timeout_seconds <= 0:
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be positive")
        if self.output_format not in _OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"must be one of {', '.join(_OUTPUT_FORMATS)}"
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )
        if self.log_file is not None and (not isinstance(self.log_file, str) or not self.log_file):
            raise InvalidConfigError("log_file", self.log_file, "must be a non-empty path")


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PRODUCT_REPORT_* environment variables.

    Supported environment variables:
        PRODUCT_REPORT_API_URL: str
        PRODUCT_REPORT_TIMEOUT_SECONDS: float
        PRODUCT_REPORT_OUTPUT_FORMAT: text/json
        PRODUCT_REPORT_VERBOSITY: quiet/normal/verbose
        PRODUCT_REPORT_LOG_FILE: str
    """
    type_hints = get_type_hints(ReportConfig)

    result: dict[str, Any] = {}

    for field_name in ReportConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    if type_hint is float:
        return float(value)
    if type_hint is int:
        return int(value)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
