# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Single-format decode and encode, with library errors tagged by format."""

from __future__ import annotations

from typing import Any, Optional

from anyserde.backends import get_backend
from anyserde.backends.base import Input
from anyserde.errors import DecodeError, EncodeError
from anyserde.format.registry import Format
from anyserde.model import CONVERSION_ERRORS, from_builtins, to_builtins


def decode(data: Input, format: Format, into: Optional[Any] = None) -> Any:
    """Decode a complete document with one format.

    Raises:
        UnsupportedFormatError: If ``format`` is not enabled.
        DecodeError: If the library rejects the input, or the decoded
            tree does not fit ``into``.
    """
    backend = get_backend(format)
    try:
        tree = backend.loads(data)
    except backend.decode_errors as e:
        raise DecodeError(format, e) from e
    try:
        return from_builtins(tree, into)
    except CONVERSION_ERRORS as e:
        raise DecodeError(format, e) from e


def encode(value: Any, format: Format, *, pretty: bool = False) -> str:
    """Encode a value with one format.

    Raises:
        UnsupportedFormatError: If ``format`` is not enabled.
        EncodeError: If the library cannot represent the value.
    """
    backend = get_backend(format)
    try:
        return backend.dumps(to_builtins(value), pretty=pretty)
    except backend.encode_errors as e:
        raise EncodeError(format, e) from e
