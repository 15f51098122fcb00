"""CLI entry point: pkgsentinel.

Subcommands:
    pkgsentinel check [package.json]             # Reconcile manifest vs installed packages
    pkgsentinel extract package.json             # Print the declared dependency map
    pkgsentinel compare 1.2.0 1.2                # Compare two version strings
    pkgsentinel providers                        # List inventory providers
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from pkgsentinel.core.config import Settings
from pkgsentinel.core.logging import LOG_FORMATS, setup_logging
from pkgsentinel.engines.version_check.checker import CheckResult, log_report, run_check
from pkgsentinel.engines.version_check.comparator import compare_versions_detailed
from pkgsentinel.engines.version_check.inventory import available_providers, get_provider
from pkgsentinel.engines.version_check.manifest import extract_section, read_manifest
from pkgsentinel.engines.version_check.models import (
    Classification,
    ReconciliationReport,
    VersionOrdering,
)
from pkgsentinel.exceptions import ConfigError, InventoryError, ManifestReadError

_ORDERING_SYMBOL = {
    VersionOrdering.LESS: "<",
    VersionOrdering.EQUAL: "=",
    VersionOrdering.GREATER: ">",
}


def _print_report(report: ReconciliationReport) -> None:
    click.echo("=== Package Version Check Results ===")
    for s in report.statuses:
        if s.classification is Classification.UP_TO_DATE:
            click.echo(f"✅ {s.name}: {s.installed_version} (up to date)")
        elif s.classification is Classification.VERSION_MISMATCH:
            click.echo(
                f"📦 {s.name}: Expected {s.expected_version}, "
                f"Installed {s.installed_version} ({s.direction})"
            )
        else:
            click.echo(f"❌ {s.name}: Expected {s.expected_version}, NOT INSTALLED")

    click.echo(
        f"=== Summary: {report.total_checked} packages checked, "
        f"{report.total_discrepancies} discrepancies found ==="
    )
    if report.is_clean:
        click.echo("🎉 All packages are up to date!")
    else:
        click.echo(
            f"⚠️ {report.total_discrepancies} packages have version discrepancies. "
            "Consider updating your project."
        )


def _result_json(result: CheckResult) -> str:
    payload = {
        "manifest": str(result.manifest.path),
        "section": result.manifest.section_key,
        "manifest_error": result.manifest.error,
        "inventory_provider": result.inventory_provider,
        **result.report.to_dict(),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging (per-package events)")
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    default=None,
    help="Log rendering on stderr (default: console)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, log_format: str | None) -> None:
    """pkgsentinel: check installed packages against a manifest's declared versions."""
    setup_logging("DEBUG" if verbose else None, log_format)
    ctx.ensure_object(dict)["verbose"] = verbose


@main.command("check")
@click.argument("manifest", required=False, type=click.Path(path_type=Path))
@click.option("--section", default=None, help="Manifest section key (default: dependencies)")
@click.option("--inventory", default=None, help="Inventory provider (see 'providers')")
@click.option(
    "--inventory-path",
    default=None,
    type=click.Path(path_type=Path),
    help="Provider location (project dir, lock file, inventory file ...)",
)
@click.option("--timeout", default=None, type=float, help="Seconds to wait for the inventory")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--strict", is_flag=True, help="Exit 1 when discrepancies are found")
@click.pass_context
def check(
    ctx: click.Context,
    manifest: Path | None,
    section: str | None,
    inventory: str | None,
    inventory_path: Path | None,
    timeout: float | None,
    as_json: bool,
    strict: bool,
) -> None:
    """Reconcile MANIFEST's declared versions with installed packages."""
    settings = _load_settings()
    manifest = manifest or settings.manifest_path
    section = section or settings.section_key
    inventory = inventory or settings.inventory
    inventory_path = inventory_path or settings.inventory_path
    timeout = timeout if timeout is not None else settings.inventory_timeout

    try:
        provider = get_provider(inventory, inventory_path)
        result = asyncio.run(run_check(manifest, provider, section_key=section, timeout=timeout))
    except InventoryError as e:
        click.echo(f"Error: Failed to list packages: {e}", err=True)
        sys.exit(2)

    if result.manifest.error:
        click.echo(f"Warning: {result.manifest.error}", err=True)

    if as_json:
        click.echo(_result_json(result))
    else:
        # Per-package log events only under -v.
        if ctx.obj.get("verbose"):
            log_report(result.report)
        _print_report(result.report)

    if strict and not result.report.is_clean:
        sys.exit(1)


@main.command("extract")
@click.argument("manifest", type=click.Path(path_type=Path))
@click.option("--section", default=None, help="Manifest section key (default: dependencies)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def extract(manifest: Path, section: str | None, as_json: bool) -> None:
    """Print the dependency map declared in MANIFEST."""
    section = section or _load_settings().section_key
    try:
        text = read_manifest(manifest)
    except ManifestReadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    declared = extract_section(text, section)
    if as_json:
        click.echo(json.dumps(dict(declared), indent=2, ensure_ascii=False))
        return
    if not declared:
        click.echo(f"No '{section}' entries found.")
        return
    for name, version in declared.items():
        click.echo(f"{name} {version}")


@main.command("compare")
@click.argument("left")
@click.argument("right")
def compare(left: str, right: str) -> None:
    """Compare version LEFT with version RIGHT."""
    comparison = compare_versions_detailed(left, right)
    line = f"{left} {_ORDERING_SYMBOL[comparison.ordering]} {right}"
    if comparison.lexical_fallback:
        line += "  (lexical comparison)"
    click.echo(line)


@main.command("providers")
def providers() -> None:
    """List registered inventory providers."""
    for name in available_providers():
        click.echo(name)


if __name__ == "__main__":
    main()
