"""Provider for Unity Package Manager lock files (Packages/packages-lock.json)."""

from __future__ import annotations

from pathlib import Path

import structlog

from pkgsentinel.engines.version_check.inventory._files import load_json, version_of
from pkgsentinel.engines.version_check.inventory.registry import register_provider
from pkgsentinel.exceptions import InventoryError

log = structlog.get_logger("pkgsentinel.inventory")

LOCK_FILE = Path("Packages") / "packages-lock.json"


class UpmLockProvider:
    """Installed packages as resolved by the Unity Package Manager.

    *location* is a Unity project directory or the lock file itself.
    """

    name = "upm-lock"

    def __init__(self, location: Path | None = None) -> None:
        location = location or Path.cwd()
        self.lock_path = location / LOCK_FILE if location.is_dir() else location

    async def list_installed(self) -> dict[str, str]:
        data = await load_json(self.lock_path)
        deps = data.get("dependencies") if isinstance(data, dict) else None
        if not isinstance(deps, dict):
            raise InventoryError(f"no 'dependencies' object in {self.lock_path}")

        installed: dict[str, str] = {}
        for name, entry in deps.items():
            version = version_of(entry)
            if version is None:
                log.debug("inventory.entry_skipped", provider=self.name, package=name)
                continue
            installed[name] = version
        return installed


register_provider(UpmLockProvider.name, UpmLockProvider)
