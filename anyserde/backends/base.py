# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Base types and utilities for format backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from anyserde.format.registry import Format

Input = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True, slots=True)
class Backend:
    """Uniform handle on one format library.

    Attributes:
        format: The format this backend implements.
        loads: Decode a complete document (text or bytes) into a value tree.
        dumps: Encode a value tree into text; ``pretty`` selects the
            human-oriented layout where the format has one.
        decode_errors: Exception types the library raises for bad input.
        encode_errors: Exception types the library raises for bad values.
    """

    format: Format
    loads: Callable[[Input], Any]
    dumps: Callable[..., str]
    decode_errors: tuple[type[BaseException], ...]
    encode_errors: tuple[type[BaseException], ...]


def as_text(data: Input) -> str:
    """Decode bytes as UTF-8; pass text through."""
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8")


def as_bytes_or_text(data: Input) -> Union[str, bytes]:
    """Normalize buffer types to ``bytes`` for libraries that take bytes or str."""
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    return data
