# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Deserialization entry points.

Fixed-format functions decode with exactly the format given. The ``_any``
variants probe every enabled format in Registry order. File functions
pick the format from the file name and fall back to probing when the
name does not settle it.

Every function takes an optional ``into=`` target type; without it the
plain value tree (dicts, lists, scalars) is returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional

from anyserde.backends.base import Input
from anyserde.codec import decode
from anyserde.errors import FileAccessError, NoMatchingFileError
from anyserde.format.registry import Format
from anyserde.format.resolve import PathLike, expand_stem, resolve_extension
from anyserde.probe import probe

logger = logging.getLogger(__name__)


def from_str(s: str, format: Format, *, into: Optional[Any] = None) -> Any:
    """Deserialize from a string using a specified format.

    Raises:
        UnsupportedFormatError: If ``format`` is not enabled.
        DecodeError: If the conversion itself fails; the library's
            exception is the cause.

    Example::

        person = from_str('{"name": "Jon Snow", "knowledge": 0}', Format.JSON, into=Person)
    """
    return decode(s, format, into)


def from_slice(b: bytes, format: Format, *, into: Optional[Any] = None) -> Any:
    """Deserialize from bytes using a specified format."""
    return decode(b, format, into)


def from_reader(reader: IO, format: Format, *, into: Optional[Any] = None) -> Any:
    """Deserialize everything readable from a text or binary stream."""
    return decode(reader.read(), format, into)


def from_str_any(s: str, *, into: Optional[Any] = None) -> Any:
    """Deserialize from a string using the first enabled format that accepts it.

    Raises:
        NoSupportedFormatsError: If no format is enabled.
        NoSuccessfulParseError: If every format fails; it carries one
            error per attempted format.
    """
    return probe(s, into=into).unwrap()


def from_slice_any(b: bytes, *, into: Optional[Any] = None) -> Any:
    """Deserialize from bytes using the first enabled format that accepts them."""
    return probe(b, into=into).unwrap()


def from_reader_any(reader: IO, *, into: Optional[Any] = None) -> Any:
    """Deserialize a stream using the first enabled format that accepts it."""
    return probe(reader.read(), into=into).unwrap()


def _read_file(path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileAccessError(path, e) from e


def _load_file(path: PathLike, into: Optional[Any]) -> tuple[Any, Format]:
    candidates = resolve_extension(path)
    data = _read_file(path)
    if len(candidates) == 1:
        return decode(data, candidates[0], into), candidates[0]
    # Zero candidates means the name says nothing: try everything enabled
    outcome = probe(data, candidates or None, into=into)
    value = outcome.unwrap()
    return value, outcome.format


def from_file(path: PathLike, *, into: Optional[Any] = None) -> Any:
    """Deserialize a file, choosing the format from its extension.

    A recognized extension selects its format and only that format is
    tried. An unrecognized or missing extension makes every enabled
    format a candidate, as in :func:`from_slice_any`.

    Raises:
        FileAccessError: If the file cannot be read.
        DecodeError: If the format named by the extension rejects the file.
        NoSuccessfulParseError: If probing was needed and every format failed.
    """
    value, _ = _load_file(path, into)
    return value


def detect_file_format(path: PathLike, *, into: Optional[Any] = None) -> Format:
    """The format :func:`from_file` would decode ``path`` with.

    Raises the same errors as :func:`from_file`.
    """
    _, fmt = _load_file(path, into)
    return fmt


def from_file_stem(stem: PathLike, *, into: Optional[Any] = None) -> Any:
    """Deserialize the first existing file named ``stem`` plus a known extension.

    Candidates come from :func:`~anyserde.format.resolve.expand_stem`. The
    first one that exists is decoded with its own format and nothing else
    is tried, even if decoding fails.

    Example::

        # Looks for settings.toml, settings.json, settings.yaml,
        # settings.yml, settings.ron and settings.xml, in that order
        settings = from_file_stem("settings", into=Settings)

    Raises:
        NoMatchingFileError: If none of the candidate files exist.
        FileAccessError: If the file found cannot be read.
        DecodeError: If the file found does not decode.
    """
    candidates = expand_stem(stem)
    for candidate in candidates:
        if candidate.path.exists():
            logger.debug("Stem %s resolved to %s", stem, candidate.path)
            return decode(_read_file(candidate.path), candidate.format, into)
    raise NoMatchingFileError(stem, [c.path for c in candidates])
