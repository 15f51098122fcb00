"""Manifest reading and best-effort dependency section extraction.

The extractor is deliberately not a JSON parser: it locates the quoted
section key, brace-matches the object that follows and splits its body on
commas. Values that are themselves objects, or quoted strings containing
commas, are not handled.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import structlog

from pkgsentinel.core.config import DEFAULT_SECTION_KEY
from pkgsentinel.exceptions import ManifestReadError

log = structlog.get_logger("pkgsentinel.manifest")


@dataclass(frozen=True)
class ManifestLoad:
    """Declared map read from a manifest file, or the reason it could not be read."""

    path: Path
    section_key: str
    declared: Mapping[str, str]
    error: str | None = None


def _strip_quotes(token: str) -> str:
    token = token.strip()
    if token.startswith('"'):
        token = token[1:]
    if token.endswith('"'):
        token = token[:-1]
    return token


def _find_section_body(text: str, section_key: str) -> str | None:
    key_at = text.find(f'"{section_key}"')
    if key_at == -1:
        return None

    brace_start = text.find("{", key_at)
    if brace_start == -1:
        return None

    depth = 0
    for i in range(brace_start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[brace_start + 1 : i]

    log.warning("manifest.section_unbalanced", section=section_key, offset=brace_start)
    return None


def extract_section(text: str, section_key: str = DEFAULT_SECTION_KEY) -> Mapping[str, str]:
    """Extract the flat ``name -> version`` entries of *section_key* from *text*.

    Never raises: a missing or malformed section yields an empty mapping and
    unparseable entries are skipped. A repeated name keeps its last value.
    """
    body = _find_section_body(text, section_key)
    if body is None:
        return MappingProxyType({})

    entries: dict[str, str] = {}
    for fragment in body.split(","):
        fragment = fragment.strip()
        if not fragment:
            continue

        parts = fragment.split(":", 1)
        if len(parts) != 2:
            log.debug("manifest.fragment_skipped", fragment=fragment)
            continue

        name = _strip_quotes(parts[0])
        version = _strip_quotes(parts[1])
        if not name or not version:
            continue

        if name in entries:
            log.debug(
                "manifest.duplicate_key",
                name=name,
                old_version=entries[name],
                new_version=version,
            )
        entries[name] = version

    return MappingProxyType(entries)


def read_manifest(path: Path) -> str:
    """Read manifest text as UTF-8.

    Raises ``ManifestReadError`` when the file is missing or unreadable.
    """
    if not path.is_file():
        raise ManifestReadError(path, "file not found")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(path, str(exc)) from exc


def load_declared(path: Path, section_key: str = DEFAULT_SECTION_KEY) -> ManifestLoad:
    """Read *path* and extract its declared dependencies.

    A read failure does not abort the check: it is logged and returned as
    ``ManifestLoad.error`` alongside an empty declared map.
    """
    try:
        text = read_manifest(path)
    except ManifestReadError as exc:
        log.warning("manifest.unreadable", path=str(path), reason=exc.reason)
        return ManifestLoad(
            path=path, section_key=section_key, declared=MappingProxyType({}), error=str(exc)
        )

    declared = extract_section(text, section_key)
    log.info("manifest.loaded", path=str(path), section=section_key, count=len(declared))
    return ManifestLoad(path=path, section_key=section_key, declared=declared)
