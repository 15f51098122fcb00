"""Shared helpers for file-backed providers."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from pkgsentinel.exceptions import InventoryError


def _load(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise InventoryError(f"inventory file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InventoryError(f"cannot read inventory file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InventoryError(f"invalid JSON in inventory file {path}: {exc}") from exc


async def load_json(path: Path) -> Any:
    """Read and decode a JSON file off the event loop."""
    return await asyncio.to_thread(_load, path)


def version_of(entry: Any) -> str | None:
    """Accept either ``"1.2.3"`` or ``{"version": "1.2.3", ...}``."""
    if isinstance(entry, str):
        return entry or None
    if isinstance(entry, dict):
        version = entry.get("version")
        if isinstance(version, str) and version:
            return version
    return None
