"""Settings for lfe.

Every option the command line accepts can also come from the environment
(``LFE_*``) or a ``.env`` file in the working directory, so a wrapper script
can pin the install root once.

Manifesto:
    - **Pydantic validation:** Type-checked at startup
    - **Environment-driven:** Reads from env vars and .env files
    - **Sensible defaults:** Run from the install root and it just works

Examples:
    >>> from lfe.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.features_dir
    PosixPath('lib/features')

Tags:
    settings, configuration, pydantic, environment, lfe

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LfeSettings(BaseSettings):
    """Explorer configuration.

    Fields
    ──────
    root              : Install root containing ``lib/features``
    features_subdir   : Manifest directory, relative to ``root``
    ignore_duplicates : Suppress duplicate-name warnings
    warn_missing      : Report dependencies on absent features
    log_level         : Structlog log level
    log_json          : JSON log lines; ``None`` detects from the terminal
    """

    model_config = SettingsConfigDict(
        env_prefix="LFE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Install layout ───────────────────────────────────────────
    root: Path = Field(default=Path("."), description="Install root directory")
    features_subdir: Path = Field(
        default=Path("lib/features"),
        description="Feature manifest directory relative to the install root",
    )

    # ── Diagnostics ──────────────────────────────────────────────
    ignore_duplicates: bool = False
    warn_missing: bool = False

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    log_json: bool | None = None

    @property
    def features_dir(self) -> Path:
        return self.root / self.features_subdir


_settings_cache: dict[str, LfeSettings] = {}


def get_settings(*, _force_reload: bool = False) -> LfeSettings:
    """Load, validate, and cache an :class:`LfeSettings` instance."""
    if _force_reload or "default" not in _settings_cache:
        _settings_cache["default"] = LfeSettings()
    return _settings_cache["default"]


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = ["LfeSettings", "get_settings", "clear_settings_cache"]
