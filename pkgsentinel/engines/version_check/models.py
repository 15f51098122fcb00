"""Data models for the version check engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class VersionOrdering(Enum):
    """Ordering of the left version relative to the right one."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Classification(Enum):
    """Per-dependency outcome of a reconciliation."""

    UP_TO_DATE = "up_to_date"
    VERSION_MISMATCH = "version_mismatch"
    NOT_INSTALLED = "not_installed"


@dataclass(frozen=True)
class VersionComparison:
    """Ordering plus whether the lexical fallback had to be used."""

    ordering: VersionOrdering
    lexical_fallback: bool = False


@dataclass(frozen=True)
class DependencyStatus:
    """Reconciliation result for one declared dependency."""

    name: str
    expected_version: str
    installed_version: str | None  # None when not installed
    ordering: VersionOrdering | None  # installed vs expected; None when not installed
    classification: Classification
    lexical_fallback: bool = False

    @property
    def direction(self) -> str | None:
        """``"newer"`` / ``"older"`` for a mismatch, else None."""
        if self.classification is not Classification.VERSION_MISMATCH:
            return None
        return "newer" if self.ordering is VersionOrdering.GREATER else "older"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "expected_version": self.expected_version,
            "installed_version": self.installed_version,
            "classification": self.classification.value,
            "direction": self.direction,
            "lexical_fallback": self.lexical_fallback,
        }


@dataclass(frozen=True)
class ReconciliationReport:
    """Statuses in manifest declaration order plus aggregate counts."""

    statuses: tuple[DependencyStatus, ...]
    total_checked: int
    total_installed: int
    total_discrepancies: int

    @property
    def up_to_date(self) -> list[DependencyStatus]:
        return [s for s in self.statuses if s.classification is Classification.UP_TO_DATE]

    @property
    def mismatched(self) -> list[DependencyStatus]:
        return [
            s for s in self.statuses if s.classification is Classification.VERSION_MISMATCH
        ]

    @property
    def not_installed(self) -> list[DependencyStatus]:
        return [s for s in self.statuses if s.classification is Classification.NOT_INSTALLED]

    @property
    def is_clean(self) -> bool:
        return self.total_discrepancies == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_checked": self.total_checked,
            "total_installed": self.total_installed,
            "total_discrepancies": self.total_discrepancies,
            "statuses": [s.to_dict() for s in self.statuses],
        }
