"""Provider for a plain JSON inventory file: ``{"name": "version", ...}``."""

from __future__ import annotations

from pathlib import Path

from pkgsentinel.engines.version_check.inventory._files import load_json, version_of
from pkgsentinel.engines.version_check.inventory.registry import register_provider
from pkgsentinel.exceptions import InventoryError

DEFAULT_FILE = "installed.json"


class JsonFileProvider:
    name = "json"

    def __init__(self, location: Path | None = None) -> None:
        self.path = location or Path(DEFAULT_FILE)

    async def list_installed(self) -> dict[str, str]:
        data = await load_json(self.path)
        if not isinstance(data, dict):
            raise InventoryError(f"expected a JSON object in {self.path}")
        installed: dict[str, str] = {}
        for name, entry in data.items():
            version = version_of(entry)
            if version is not None:
                installed[name] = version
        return installed


register_provider(JsonFileProvider.name, JsonFileProvider)
