# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Format metadata and name-based format resolution.

Nothing in this package decodes or encodes; it only answers which
formats exist, which are enabled, and which ones a file name points to.
"""

from anyserde.format.registry import (
    Format,
    all_formats,
    enabled_formats,
    extensions_of,
    supported_extensions,
)
from anyserde.format.resolve import (
    StemCandidate,
    expand_stem,
    file_extension,
    guess_format,
    guess_format_from_extension,
    resolve_extension,
)

__all__ = [
    # Registry
    "Format",
    "all_formats",
    "enabled_formats",
    "extensions_of",
    "supported_extensions",
    # Resolution
    "StemCandidate",
    "expand_stem",
    "file_extension",
    "guess_format",
    "guess_format_from_extension",
    "resolve_extension",
]
