"""Tolerant version comparison.

Versions are compared as ``major[.minor[.build[.revision]]]`` after dropping
any pre-release/build suffix. Anything that does not fit that shape falls
back to a case-insensitive ordinal comparison of the raw strings, so a
comparison always yields a definite ordering.
"""

from __future__ import annotations

import re

from pkgsentinel.engines.version_check.models import VersionComparison, VersionOrdering

_NUMERIC_RE = re.compile(r"[0-9]+(?:\.[0-9]+){0,3}")
_SUFFIX_RE = re.compile(r"[-+]")

_COMPONENTS = 4


def strip_suffix(version: str) -> str:
    """Truncate *version* at the first ``-`` or ``+``."""
    m = _SUFFIX_RE.search(version)
    return version[: m.start()] if m else version


def parse_version(version: str) -> tuple[int, ...] | None:
    """Parse the dotted-numeric core of *version*, zero-filled to four parts.

    Returns None when the stripped string is empty or not dotted-numeric.
    """
    core = strip_suffix(version)
    if not _NUMERIC_RE.fullmatch(core):
        return None
    parts = [int(p) for p in core.split(".")]
    return tuple(parts + [0] * (_COMPONENTS - len(parts)))


def _sign(value: int) -> VersionOrdering:
    if value < 0:
        return VersionOrdering.LESS
    if value > 0:
        return VersionOrdering.GREATER
    return VersionOrdering.EQUAL


def _upper_char(ch: str) -> str:
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _ordinal_upper(text: str) -> str:
    """Upper-case *text* one code point at a time.

    Characters whose upper case expands (``ß`` -> ``SS``) are kept as-is, so
    the string length never changes.
    """
    return "".join(_upper_char(ch) for ch in text)


def compare_versions_detailed(a: str, b: str) -> VersionComparison:
    left = parse_version(a)
    right = parse_version(b)

    if left is not None and right is not None:
        for x, y in zip(left, right):
            if x != y:
                return VersionComparison(_sign(x - y))
        return VersionComparison(VersionOrdering.EQUAL)

    ua, ub = _ordinal_upper(a), _ordinal_upper(b)
    return VersionComparison(_sign((ua > ub) - (ua < ub)), lexical_fallback=True)


def compare_versions(a: str, b: str) -> VersionOrdering:
    """Return the ordering of version *a* relative to version *b*."""
    return compare_versions_detailed(a, b).ordering
