"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError


class XLogSettings(BaseSettings):
    """Logging settings for applications using xlog.

    Every field can be overridden with an ``XLOG_``-prefixed environment
    variable, e.g. ``XLOG_LOG_FORMAT=console``.
    """

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    log_stream: Literal["stdout", "stderr"] = "stderr"
    # Structured events go to their own stream so collectors can tail it
    event_stream: Literal["stdout", "stderr"] = "stdout"

    model_config = {"env_prefix": "XLOG_"}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> XLogSettings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).  Keys are read
            from an ``[xlog]`` table when present, else from the top level.
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: if the file is unreadable or a value fails validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    raw = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
            data = dict(raw.get("xlog", raw))

    if overrides:
        data.update(overrides)

    try:
        return XLogSettings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
