"""Version check engine: reconcile declared dependencies with installed packages."""

from pkgsentinel.engines.version_check.checker import CheckResult, log_report, run_check
from pkgsentinel.engines.version_check.comparator import compare_versions
from pkgsentinel.engines.version_check.manifest import extract_section, load_declared
from pkgsentinel.engines.version_check.models import (
    Classification,
    DependencyStatus,
    ReconciliationReport,
    VersionOrdering,
)
from pkgsentinel.engines.version_check.reconciler import reconcile

__all__ = [
    "CheckResult",
    "Classification",
    "DependencyStatus",
    "ReconciliationReport",
    "VersionOrdering",
    "compare_versions",
    "extract_section",
    "load_declared",
    "log_report",
    "reconcile",
    "run_check",
]
