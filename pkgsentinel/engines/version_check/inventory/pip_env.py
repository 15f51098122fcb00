"""Provider for distributions installed in the running Python environment."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

from pkgsentinel.engines.version_check.inventory.registry import register_provider


class PipEnvironmentProvider:
    """Distributions visible to ``importlib.metadata``.

    With a *location* (e.g. a venv's site-packages) only that directory is
    searched instead of ``sys.path``.
    """

    name = "pip"

    def __init__(self, location: Path | None = None) -> None:
        self.location = location

    async def list_installed(self) -> dict[str, str]:
        kwargs = {"path": [str(self.location)]} if self.location else {}
        installed: dict[str, str] = {}
        for dist in metadata.distributions(**kwargs):
            name = dist.metadata["Name"]
            # First hit wins, matching import precedence on sys.path.
            if name and name not in installed:
                installed[name] = dist.version
        return installed


register_provider(PipEnvironmentProvider.name, PipEnvironmentProvider)
