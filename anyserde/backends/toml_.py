# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
TOML backend (``tomllib`` for reading, ``tomli-w`` for writing).

TOML has no null value. ``None`` entries of tables are left out on
encode, so the target type needs a default for every optional field.
A TOML document is always a table; encoding anything else fails.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from typing import Any

import tomli_w

from anyserde.backends.base import Backend, Input, as_text
from anyserde.format.registry import Format


def loads(data: Input) -> Any:
    return tomllib.loads(as_text(data))


def _drop_none(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_drop_none(v) for v in value]
    return value


def dumps(value: Any, *, pretty: bool = False) -> str:
    """Encode a table. Pretty output writes multi-line strings as such."""
    if not isinstance(value, Mapping):
        raise TypeError(
            f"TOML documents must be tables, got {type(value).__name__}"
        )
    return tomli_w.dumps(_drop_none(value), multiline_strings=pretty)


BACKEND = Backend(
    format=Format.TOML,
    loads=loads,
    dumps=dumps,
    decode_errors=(tomllib.TOMLDecodeError, UnicodeDecodeError, ValueError, RecursionError),
    encode_errors=(TypeError, ValueError),
)
