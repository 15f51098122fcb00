"""Installed-inventory providers — auto-registered on import."""

from pkgsentinel.engines.version_check.inventory import (
    json_file,  # noqa: F401
    npm_list,  # noqa: F401
    pip_env,  # noqa: F401
    upm_lock,  # noqa: F401
)
from pkgsentinel.engines.version_check.inventory.registry import (
    PROVIDER_REGISTRY,
    InventoryProvider,
    available_providers,
    get_provider,
    register_provider,
)

__all__ = [
    "PROVIDER_REGISTRY",
    "InventoryProvider",
    "available_providers",
    "get_provider",
    "register_provider",
]
