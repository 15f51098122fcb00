"""Tests for tolerant version comparison."""

from __future__ import annotations

import itertools

import pytest

from pkgsentinel.engines.version_check.comparator import (
    compare_versions,
    compare_versions_detailed,
    parse_version,
    strip_suffix,
)
from pkgsentinel.engines.version_check.models import VersionOrdering

LESS = VersionOrdering.LESS
EQUAL = VersionOrdering.EQUAL
GREATER = VersionOrdering.GREATER


# ── parsing ──────────────────────────────────────────────────────────────


class TestParseVersion:
    def test_full_four_components(self):
        assert parse_version("1.2.3.4") == (1, 2, 3, 4)

    def test_zero_fill(self):
        assert parse_version("7") == (7, 0, 0, 0)
        assert parse_version("1.2") == (1, 2, 0, 0)

    def test_suffix_stripped(self):
        assert parse_version("2.0.0-preview.3") == (2, 0, 0, 0)
        assert parse_version("1.0.0+build.5") == (1, 0, 0, 0)

    def test_first_of_dash_or_plus_wins(self):
        assert strip_suffix("1.0+meta-data") == "1.0"
        assert strip_suffix("1.0-pre+meta") == "1.0"
        assert strip_suffix("1.0") == "1.0"

    @pytest.mark.parametrize(
        "raw",
        ["", "-beta", "1.2.3.4.5", "1..2", "1.2.", ".1", "v1.2", "1.x", " 1.2", "1.2\n", "abc"],
    )
    def test_unparseable(self, raw):
        assert parse_version(raw) is None


# ── comparison ───────────────────────────────────────────────────────────


class TestCompareVersions:
    def test_equal(self):
        assert compare_versions("1.2.3", "1.2.3") == EQUAL

    def test_implicit_zero_fill_is_equal(self):
        assert compare_versions("1.2.0", "1.2") == EQUAL
        assert compare_versions("1", "1.0.0.0") == EQUAL

    def test_suffix_ignored(self):
        assert compare_versions("2.0.0-beta", "2.0.0") == EQUAL
        assert compare_versions("2.0.0+exp.sha.5114f85", "2.0.0-rc.1") == EQUAL

    def test_numeric_not_lexical(self):
        assert compare_versions("1.10.0", "1.9.0") == GREATER
        assert compare_versions("1.9.0", "1.10.0") == LESS

    def test_first_differing_component_decides(self):
        assert compare_versions("2.0.0", "1.99.99") == GREATER
        assert compare_versions("1.2.3.4", "1.2.3.5") == LESS

    def test_lexical_fallback_case_insensitive(self):
        assert compare_versions("abc", "abd") == LESS
        assert compare_versions("ABC", "abc") == EQUAL
        assert compare_versions("abd", "ABC") == GREATER

    def test_fallback_uses_unstripped_inputs(self):
        # "-beta" strips to "" which is unparseable; raw strings differ.
        result = compare_versions_detailed("-beta", "-alpha")
        assert result.lexical_fallback is True
        assert result.ordering == GREATER

    def test_expanding_upper_case_not_folded(self):
        result = compare_versions_detailed("straße", "STRASSE")
        assert result.lexical_fallback is True
        assert result.ordering == GREATER  # "ß" (U+00DF) sorts after "S"
        assert compare_versions("straße", "STRAßE") == EQUAL

    def test_one_side_unparseable_falls_back(self):
        result = compare_versions_detailed("1.0.0", "latest")
        assert result.lexical_fallback is True
        assert result.ordering == LESS  # "1" < "L"

    def test_numeric_comparison_not_flagged(self):
        assert compare_versions_detailed("1.0", "1.0.1").lexical_fallback is False

    @pytest.mark.parametrize("a,b", [("", ""), ("🙂", "1.0"), ("1.0-", "+")])
    def test_never_raises_on_odd_input(self, a, b):
        assert compare_versions(a, b) in (LESS, EQUAL, GREATER)


class TestComparisonProperties:
    VERSIONS = ["0", "0.1", "1", "1.0.0", "1.0.1", "1.2", "1.10", "2.0.0.1", "10.0"]

    def test_reflexive(self):
        for v in self.VERSIONS:
            assert compare_versions(v, v) == EQUAL

    def test_antisymmetric(self):
        for a, b in itertools.product(self.VERSIONS, repeat=2):
            forward = compare_versions(a, b)
            backward = compare_versions(b, a)
            assert (forward == GREATER) == (backward == LESS)
            assert (forward == EQUAL) == (backward == EQUAL)
