# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Name-based format resolution.

- Extension Resolver: file name -> candidate formats
- Stem Expander: stem -> ordered (file name, format) candidates

Both only ever return enabled formats and always follow the canonical
Registry order. An empty result means "unknown from the name"; callers
decide whether to probe the content or fail.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from anyserde.format.registry import Format, enabled_formats

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True, slots=True)
class StemCandidate:
    """A file name generated from a stem, paired with the format it implies."""

    path: Path
    format: Format


def file_extension(file_name: PathLike) -> str:
    """Extension of the last path component, lowercased and without the dot.

    Returns an empty string when there is no extension. A leading dot
    alone (``.json``) marks a hidden file, not an extension.
    """
    name = os.path.basename(os.fspath(file_name))
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return ext.casefold()


def _formats_for_extension(ext: str) -> list[Format]:
    ext = ext.casefold()
    if not ext:
        return []
    return [fmt for fmt in enabled_formats() if ext in fmt.extensions]


def resolve_extension(file_name: PathLike) -> list[Format]:
    """Candidate formats for a file name, in Registry order.

    Examples::

        resolve_extension("data.yml")      -> [Format.YAML]
        resolve_extension("DATA.JSON")     -> [Format.JSON]
        resolve_extension("data.unknown")  -> []
        resolve_extension("Makefile")      -> []
    """
    return _formats_for_extension(file_extension(file_name))


def guess_format_from_extension(ext: str) -> Optional[Format]:
    """The first enabled format recognizing ``ext`` (dot optional), or None."""
    candidates = _formats_for_extension(ext.lstrip("."))
    return candidates[0] if candidates else None


def guess_format(path: PathLike) -> Optional[Format]:
    """The first enabled format matching the extension of ``path``, or None."""
    candidates = resolve_extension(path)
    return candidates[0] if candidates else None


def expand_stem(stem: PathLike) -> list[StemCandidate]:
    """Expand a stem into candidate file names.

    Candidates are ordered by format (Registry order), then by extension
    within a format (primary before aliases)::

        expand_stem("cfg") -> cfg.toml, cfg.json, cfg.yaml, cfg.yml, cfg.ron, cfg.xml

    The extension is appended, never substituted, so ``app.local``
    expands to ``app.local.json`` and so on.
    """
    base = os.fspath(stem)
    return [
        StemCandidate(path=Path(f"{base}.{ext}"), format=fmt)
        for fmt in enabled_formats()
        for ext in fmt.extensions
    ]
