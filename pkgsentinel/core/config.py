"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pkgsentinel.exceptions import ConfigError

DEFAULT_MANIFEST = "package.json"
DEFAULT_SECTION_KEY = "dependencies"
DEFAULT_INVENTORY = "upm-lock"
DEFAULT_INVENTORY_TIMEOUT = 30.0


def _env_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number of seconds, got {raw!r}") from None


def _env_path(key: str) -> Path | None:
    value = os.environ.get(key)
    return Path(value) if value else None


@dataclass(frozen=True)
class Settings:
    """Defaults for a check run. CLI options override every field."""

    manifest_path: Path
    section_key: str
    inventory: str
    inventory_path: Path | None
    inventory_timeout: float

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        Reads:
            PKGSENTINEL_MANIFEST           — manifest file (default: package.json)
            PKGSENTINEL_SECTION_KEY        — manifest section (default: dependencies)
            PKGSENTINEL_INVENTORY          — inventory provider (default: upm-lock)
            PKGSENTINEL_INVENTORY_PATH     — provider location (default: provider's own)
            PKGSENTINEL_INVENTORY_TIMEOUT  — seconds to wait for the provider (default: 30)

        Raises ``ConfigError`` when the timeout is not a number.
        """
        return cls(
            manifest_path=Path(os.environ.get("PKGSENTINEL_MANIFEST", DEFAULT_MANIFEST)),
            section_key=os.environ.get("PKGSENTINEL_SECTION_KEY", DEFAULT_SECTION_KEY),
            inventory=os.environ.get("PKGSENTINEL_INVENTORY", DEFAULT_INVENTORY),
            inventory_path=_env_path("PKGSENTINEL_INVENTORY_PATH"),
            inventory_timeout=_env_float("PKGSENTINEL_INVENTORY_TIMEOUT", DEFAULT_INVENTORY_TIMEOUT),
        )
