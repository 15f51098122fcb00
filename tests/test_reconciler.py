"""Tests for the reconciler and report model."""

from __future__ import annotations

import dataclasses

import pytest

from pkgsentinel.engines.version_check.models import (
    Classification,
    DependencyStatus,
    VersionOrdering,
)
from pkgsentinel.engines.version_check.reconciler import reconcile


class TestReconcile:
    def test_up_to_date(self):
        report = reconcile({"com.a": "1.0.0"}, {"com.a": "1.0.0"})
        assert report.total_checked == 1
        assert report.total_installed == 1
        assert report.total_discrepancies == 0
        status = report.statuses[0]
        assert status.classification is Classification.UP_TO_DATE
        assert status.ordering is VersionOrdering.EQUAL
        assert status.direction is None
        assert report.is_clean

    def test_equal_after_zero_fill_is_up_to_date(self):
        report = reconcile({"com.a": "1.2"}, {"com.a": "1.2.0"})
        assert report.statuses[0].classification is Classification.UP_TO_DATE

    def test_newer_installed_is_mismatch(self):
        report = reconcile({"com.a": "1.0.0"}, {"com.a": "1.1.0"})
        assert report.total_discrepancies == 1
        status = report.statuses[0]
        assert status.classification is Classification.VERSION_MISMATCH
        assert status.installed_version == "1.1.0"
        assert status.ordering is VersionOrdering.GREATER
        assert status.direction == "newer"
        assert not report.is_clean

    def test_older_installed_is_mismatch(self):
        status = reconcile({"com.a": "2.0.0"}, {"com.a": "1.9.9"}).statuses[0]
        assert status.classification is Classification.VERSION_MISMATCH
        assert status.direction == "older"

    def test_not_installed(self):
        report = reconcile({"com.a": "1.0.0"}, {})
        assert report.total_checked == 1
        assert report.total_installed == 0
        assert report.total_discrepancies == 1
        status = report.statuses[0]
        assert status.classification is Classification.NOT_INSTALLED
        assert status.installed_version is None
        assert status.ordering is None
        assert status.direction is None

    def test_lexical_fallback_recorded(self):
        status = reconcile({"com.a": "latest"}, {"com.a": "LATEST"}).statuses[0]
        assert status.classification is Classification.UP_TO_DATE
        assert status.lexical_fallback is True

    def test_declaration_order_and_counts(self):
        declared = {"c": "1.0", "a": "2.0", "b": "3.0", "d": "4.0"}
        installed = {"a": "2.0", "b": "3.1", "d": "4.0", "extra": "9.9"}
        report = reconcile(declared, installed)

        assert [s.name for s in report.statuses] == ["c", "a", "b", "d"]
        assert report.total_checked == 4
        assert report.total_installed == 3
        assert report.total_discrepancies == 2
        assert [s.name for s in report.not_installed] == ["c"]
        assert [s.name for s in report.mismatched] == ["b"]
        assert [s.name for s in report.up_to_date] == ["a", "d"]

    def test_undeclared_installed_packages_ignored(self):
        report = reconcile({}, {"com.a": "1.0.0"})
        assert report.statuses == ()
        assert report.total_checked == 0
        assert report.total_installed == 0
        assert report.is_clean

    def test_counts_match_statuses(self):
        declared = {f"pkg{i}": "1.0" for i in range(10)}
        installed = {f"pkg{i}": ("1.0" if i % 3 else "1.1") for i in range(0, 10, 2)}
        report = reconcile(declared, installed)
        assert report.total_checked == len(report.statuses)
        not_ok = [s for s in report.statuses if s.classification is not Classification.UP_TO_DATE]
        assert report.total_discrepancies == len(not_ok)

    def test_idempotent(self):
        declared = {"a": "1.0", "b": "2.0-beta", "c": "x"}
        installed = {"a": "1.0.0", "b": "2.1"}
        assert reconcile(declared, installed) == reconcile(declared, installed)

    def test_inputs_not_mutated(self):
        declared = {"a": "1.0"}
        installed = {"a": "2.0"}
        reconcile(declared, installed)
        assert declared == {"a": "1.0"}
        assert installed == {"a": "2.0"}


class TestReportSerialization:
    def test_to_dict(self):
        report = reconcile({"a": "1.0", "b": "1.0"}, {"a": "0.9"})
        assert report.to_dict() == {
            "total_checked": 2,
            "total_installed": 1,
            "total_discrepancies": 2,
            "statuses": [
                {
                    "name": "a",
                    "expected_version": "1.0",
                    "installed_version": "0.9",
                    "classification": "version_mismatch",
                    "direction": "older",
                    "lexical_fallback": False,
                },
                {
                    "name": "b",
                    "expected_version": "1.0",
                    "installed_version": None,
                    "classification": "not_installed",
                    "direction": None,
                    "lexical_fallback": False,
                },
            ],
        }

    def test_status_is_frozen(self):
        status = DependencyStatus(
            name="a",
            expected_version="1.0",
            installed_version="1.0",
            ordering=VersionOrdering.EQUAL,
            classification=Classification.UP_TO_DATE,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            status.name = "b"  # type: ignore[misc]
