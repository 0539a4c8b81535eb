"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (subprocess runner, detectors) read config consistently.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "libc-probe"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "libc-probe"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "libc-probe"
    return Path.home() / ".config" / "libc-probe"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class DetectorMode(str, Enum):
    """Which `PlatformDetector` variant to build at startup."""

    AUTO = "auto"
    REAL = "real"
    NULL = "null"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into parsing logic.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIBC_PROBE_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    glibc_command: str = Field(
        default="ldd",
        min_length=1,
        description="Primary diagnostic command (glibc). Must be launchable.",
    )
    musl_command: str = Field(
        default="musl-ldd",
        min_length=1,
        description="Musl-specific diagnostic command; optional evidence.",
    )
    version_flag: str = Field(
        default="--version",
        min_length=1,
        description="Argument passed to both diagnostic commands.",
    )
    detector: DetectorMode = Field(
        default=DetectorMode.AUTO,
        description="auto: real detector on Linux, null elsewhere; real/null force a variant.",
    )
    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-command timeout (seconds). None blocks until the command exits.",
    )
