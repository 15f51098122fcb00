"""Reconciler — compare declared versions with the installed inventory."""

from __future__ import annotations

from typing import Mapping

from pkgsentinel.engines.version_check.comparator import compare_versions_detailed
from pkgsentinel.engines.version_check.models import (
    Classification,
    DependencyStatus,
    ReconciliationReport,
    VersionOrdering,
)


def reconcile(
    declared: Mapping[str, str],
    installed: Mapping[str, str],
) -> ReconciliationReport:
    """Build a report with one status per declared dependency, in declaration order.

    Pure function: no I/O and no logging; presentation is up to the caller.
    """
    statuses: list[DependencyStatus] = []
    total_installed = 0
    total_discrepancies = 0

    for name, expected in declared.items():
        if name not in installed:
            total_discrepancies += 1
            statuses.append(
                DependencyStatus(
                    name=name,
                    expected_version=expected,
                    installed_version=None,
                    ordering=None,
                    classification=Classification.NOT_INSTALLED,
                )
            )
            continue

        installed_version = installed[name]
        total_installed += 1
        comparison = compare_versions_detailed(installed_version, expected)
        if comparison.ordering is VersionOrdering.EQUAL:
            classification = Classification.UP_TO_DATE
        else:
            classification = Classification.VERSION_MISMATCH
            total_discrepancies += 1

        statuses.append(
            DependencyStatus(
                name=name,
                expected_version=expected,
                installed_version=installed_version,
                ordering=comparison.ordering,
                classification=classification,
                lexical_fallback=comparison.lexical_fallback,
            )
        )

    return ReconciliationReport(
        statuses=tuple(statuses),
        total_checked=len(statuses),
        total_installed=total_installed,
        total_discrepancies=total_discrepancies,
    )
