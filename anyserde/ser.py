# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Serialization entry points.

Unlike deserialization there is nothing to probe, so :func:`to_file`
fails on a file name whose extension names no enabled format.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Any

from anyserde.codec import encode
from anyserde.errors import FileAccessError, UnsupportedExtensionError
from anyserde.format.registry import Format
from anyserde.format.resolve import PathLike, file_extension, resolve_extension


def to_string(value: Any, format: Format) -> str:
    """Serialize to a string using a specified format.

    Raises:
        UnsupportedFormatError: If ``format`` is not enabled.
        EncodeError: If the format cannot represent ``value``.
    """
    return encode(value, format)


def to_string_pretty(value: Any, format: Format) -> str:
    """Serialize to a human-oriented string using a specified format."""
    return encode(value, format, pretty=True)


def to_vec(value: Any, format: Format) -> bytes:
    """Serialize to UTF-8 bytes using a specified format."""
    return encode(value, format).encode("utf-8")


def to_vec_pretty(value: Any, format: Format) -> bytes:
    return encode(value, format, pretty=True).encode("utf-8")


def _write(writer: IO, text: str) -> None:
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        writer.write(text.encode("utf-8"))
    else:
        writer.write(text)


def to_writer(writer: IO, value: Any, format: Format) -> None:
    """Serialize into a stream. Binary streams receive UTF-8 bytes.

    Nothing is written if encoding fails.
    """
    _write(writer, encode(value, format))


def to_writer_pretty(writer: IO, value: Any, format: Format) -> None:
    _write(writer, encode(value, format, pretty=True))


def _to_file(path: PathLike, value: Any, pretty: bool) -> None:
    candidates = resolve_extension(path)
    if not candidates:
        raise UnsupportedExtensionError(file_extension(path), path)
    data = encode(value, candidates[0], pretty=pretty).encode("utf-8")
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise FileAccessError(path, e) from e


def to_file(path: PathLike, value: Any) -> None:
    """Serialize to a file, choosing the format from its extension.

    The file is only created once encoding has succeeded.

    Raises:
        UnsupportedExtensionError: If the extension names no enabled format.
        EncodeError: If the format cannot represent ``value``.
        FileAccessError: If the file cannot be written.
    """
    _to_file(path, value, pretty=False)


def to_file_pretty(path: PathLike, value: Any) -> None:
    """Like :func:`to_file`, with the format's human-oriented layout."""
    _to_file(path, value, pretty=True)
