"""Provider backed by ``npm ls --json --depth=0``."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import structlog

from pkgsentinel.engines.version_check.inventory._files import version_of
from pkgsentinel.engines.version_check.inventory.registry import register_provider
from pkgsentinel.exceptions import InventoryError

log = structlog.get_logger("pkgsentinel.inventory")

NPM_LS_CMD = ["npm", "ls", "--json", "--depth=0"]


class NpmListProvider:
    """Top-level packages installed in a node project directory."""

    name = "npm"

    def __init__(self, location: Path | None = None) -> None:
        self.project_dir = location or Path.cwd()

    async def list_installed(self) -> dict[str, str]:
        stdout = await _run(NPM_LS_CMD, self.project_dir)
        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as exc:
            raise InventoryError(f"npm ls produced invalid JSON: {exc}") from exc

        deps = data.get("dependencies") if isinstance(data, dict) else None
        installed: dict[str, str] = {}
        for name, entry in (deps or {}).items():
            version = version_of(entry)
            if version is not None:
                installed[name] = version
        return installed


async def _run(cmd: list[str], cwd: Path) -> str:
    """Run *cmd* in *cwd* and return stdout.

    npm exits non-zero for peer/extraneous problems while still printing the
    tree, so a non-zero exit only fails when stdout is empty.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise InventoryError(f"command not found: {cmd[0]}") from exc

    stdout, stderr = await proc.communicate()
    output = stdout.decode(errors="replace").strip()
    if proc.returncode != 0:
        if not output:
            raise InventoryError(
                f"{' '.join(cmd)} failed (exit {proc.returncode}): "
                f"{stderr.decode(errors='replace').strip()}"
            )
        log.debug("inventory.npm_nonzero_exit", returncode=proc.returncode)
    return output


register_provider(NpmListProvider.name, NpmListProvider)
