"""Configuration loading and management for git-report.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Global config (~/.git-report.toml)
    3. Project config (./git-report.toml)
    4. Explicit config file
    5. Environment variables (GIT_REPORT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(top_n=5)
    >>> config.top_n
    5
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

PLOT_WIDTH = 1200
DEFAULT_OUTPUT = "git-report.html"
DEFAULT_EXCLUDE_DIRS = [
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "vendor",
    "venv",
    ".venv",
    "__pycache__",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
    "dist",
    "build",
    "target",
    ".eggs",
]


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for one report run.

    Attributes:
        top_n: How many authors the ranking chart keeps
        plot_width: Width in pixels of the activity chart; the ranking
            chart is half as wide
        output_path: Where the HTML report is written
        open_browser: Open the report in a browser once written
        include_plotlyjs: "cdn" links plotly.js, "inline" embeds it
        git_timeout_seconds: Timeout for the git log subprocess
        exclude_dirs: Directory names skipped when counting lines
        verbosity: Logging verbosity level
        log_file: Optional file that also receives log records
    """

    top_n: int = 10
    plot_width: int = PLOT_WIDTH
    output_path: str = DEFAULT_OUTPUT
    open_browser: bool = True
    include_plotlyjs: str = "cdn"
    git_timeout_seconds: int = 60
    exclude_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        _check_types(self)
        if self.top_n < 0:
            raise InvalidConfigError("top_n", self.top_n, "must be non-negative")
        # the activity chart is drawn 50px narrower than plot_width
        if self.plot_width <= 50:
            raise InvalidConfigError("plot_width", self.plot_width, "must be greater than 50")
        if not self.output_path:
            raise InvalidConfigError("output_path", self.output_path, "must not be empty")
        if self.include_plotlyjs not in ("cdn", "inline"):
            raise InvalidConfigError(
                "include_plotlyjs", self.include_plotlyjs, "expected 'cdn' or 'inline'"
            )
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


_INT_FIELDS = ("top_n", "plot_width", "git_timeout_seconds")
_STR_FIELDS = ("output_path", "include_plotlyjs", "verbosity")


def _check_types(config: ReportConfig) -> None:
    """Reject values of the wrong type (TOML strings where ints belong, etc.)."""
    for name in _INT_FIELDS:
        value = getattr(config, name)
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigError(name, value, "expected an integer")
    for name in _STR_FIELDS:
        value = getattr(config, name)
        if not isinstance(value, str):
            raise InvalidConfigError(name, value, "expected a string")
    if not isinstance(config.open_browser, bool):
        raise InvalidConfigError("open_browser", config.open_browser, "expected true or false")
    if config.log_file is not None and not isinstance(config.log_file, str):
        raise InvalidConfigError("log_file", config.log_file, "expected a string")
    if not isinstance(config.exclude_dirs, list) or not all(
        isinstance(d, str) for d in config.exclude_dirs
    ):
        raise InvalidConfigError(
            "exclude_dirs", config.exclude_dirs, "expected a list of directory names"
        )


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options fall through

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".git-report.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "git-report.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GIT_REPORT_* environment variables.

    Supported environment variables:
        GIT_REPORT_TOP_N: int
        GIT_REPORT_PLOT_WIDTH: int
        GIT_REPORT_OUTPUT_PATH: str
        GIT_REPORT_OPEN_BROWSER: bool (true/false/1/0)
        GIT_REPORT_INCLUDE_PLOTLYJS: cdn/inline
        GIT_REPORT_GIT_TIMEOUT_SECONDS: int
        GIT_REPORT_VERBOSITY: quiet/normal/verbose
        GIT_REPORT_LOG_FILE: str
    """
    type_hints = get_type_hints(ReportConfig)

    result: dict[str, Any] = {}

    for field_name in ReportConfig.__dataclass_fields__:
        env_key = f"GIT_REPORT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that can't be expressed as a single string
    (lists).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))
        origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file can't be read or parsed
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
