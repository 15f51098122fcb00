"""Provider registry — look up installed-inventory collaborators by name."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from pkgsentinel.exceptions import ProviderNotFoundError


@runtime_checkable
class InventoryProvider(Protocol):
    """Interface that every installed-inventory provider must satisfy."""

    name: str

    async def list_installed(self) -> dict[str, str]: ...


ProviderFactory = Callable[[Path | None], InventoryProvider]

PROVIDER_REGISTRY: dict[str, ProviderFactory] = {}


def register_provider(name: str, factory: ProviderFactory) -> None:
    """Register a provider factory under *name*."""
    PROVIDER_REGISTRY[name] = factory


def available_providers() -> list[str]:
    return sorted(PROVIDER_REGISTRY)


def get_provider(name: str, location: Path | None = None) -> InventoryProvider:
    """Instantiate the provider registered as *name* for *location*.

    Raises ``ProviderNotFoundError`` for an unknown name.
    """
    factory = PROVIDER_REGISTRY.get(name)
    if factory is None:
        raise ProviderNotFoundError(name, available_providers())
    return factory(location)
