"""Custom exceptions for pkgsentinel."""

from __future__ import annotations

from pathlib import Path


class PkgSentinelError(Exception):
    """Base exception for all pkgsentinel errors."""


class ManifestReadError(PkgSentinelError):
    """Raised when the manifest file is missing or cannot be read."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read manifest {self.path}: {reason}")


class ConfigError(PkgSentinelError):
    """Raised when an environment setting has an invalid value."""


class InventoryError(PkgSentinelError):
    """Raised when an inventory provider fails to list installed packages."""


class ProviderNotFoundError(InventoryError):
    """Raised when no inventory provider is registered under a name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown inventory provider '{name}'. Available: {', '.join(available) or 'none'}"
        )
