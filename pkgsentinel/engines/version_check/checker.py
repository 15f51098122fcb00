"""Run one check: read the manifest, await the inventory, reconcile, present."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

import structlog

from pkgsentinel.core.config import DEFAULT_INVENTORY_TIMEOUT, DEFAULT_SECTION_KEY
from pkgsentinel.engines.version_check.inventory import InventoryProvider
from pkgsentinel.engines.version_check.manifest import ManifestLoad, load_declared
from pkgsentinel.engines.version_check.models import Classification, ReconciliationReport
from pkgsentinel.engines.version_check.reconciler import reconcile
from pkgsentinel.exceptions import InventoryError

log = structlog.get_logger("pkgsentinel.engine")


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check run."""

    manifest: ManifestLoad
    inventory_provider: str
    report: ReconciliationReport


async def fetch_inventory(
    provider: InventoryProvider,
    timeout: float = DEFAULT_INVENTORY_TIMEOUT,
) -> dict[str, str]:
    """Await *provider*'s inventory, turning a timeout into ``InventoryError``."""
    try:
        installed = await asyncio.wait_for(provider.list_installed(), timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise InventoryError(
            f"inventory provider '{provider.name}' timed out after {timeout:g}s"
        ) from exc
    log.info("inventory.loaded", provider=provider.name, count=len(installed))
    return installed


async def run_check(
    manifest_path: Path,
    provider: InventoryProvider,
    *,
    section_key: str = DEFAULT_SECTION_KEY,
    timeout: float = DEFAULT_INVENTORY_TIMEOUT,
) -> CheckResult:
    """Run one full check.

    An unreadable manifest is not fatal (the report is simply empty);
    ``InventoryError`` from the provider propagates to the caller.
    """
    log.info("check.started", manifest=str(manifest_path), provider=provider.name)
    manifest = load_declared(manifest_path, section_key)
    installed = await fetch_inventory(provider, timeout)
    report = reconcile(manifest.declared, installed)
    return CheckResult(manifest=manifest, inventory_provider=provider.name, report=report)


def log_report(report: ReconciliationReport) -> None:
    """Emit one event per dependency and a summary."""
    for status in report.statuses:
        if status.classification is Classification.UP_TO_DATE:
            log.info("check.up_to_date", package=status.name, version=status.installed_version)
        elif status.classification is Classification.VERSION_MISMATCH:
            log.info(
                "check.version_mismatch",
                package=status.name,
                expected=status.expected_version,
                installed=status.installed_version,
                direction=status.direction,
            )
        else:
            log.warning(
                "check.not_installed", package=status.name, expected=status.expected_version
            )

    log.info(
        "check.summary",
        checked=report.total_checked,
        installed=report.total_installed,
        discrepancies=report.total_discrepancies,
    )
    if report.is_clean:
        log.info("check.all_up_to_date")
    else:
        log.warning(
            "check.discrepancies_found",
            discrepancies=report.total_discrepancies,
            hint="consider updating your project",
        )
