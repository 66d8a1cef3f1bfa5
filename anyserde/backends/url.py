# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
URL-encoded form backend (``application/x-www-form-urlencoded``).

The value is a flat mapping of scalars. A key repeated in the input
decodes to a list, and a list value encodes as a repeated key. Nested
mappings cannot be represented. ``None`` entries are left out on encode.
Every decoded value is a string.

Non-empty input that is not a list of ``key=value`` pairs is rejected, so
free text is not mistaken for a form while probing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

from anyserde.backends.base import Backend, Input, as_text
from anyserde.format.registry import Format


def loads(data: Input) -> Any:
    text = as_text(data).strip()
    result: dict[str, Any] = {}
    if not text:
        return result
    for key, value in parse_qsl(text, keep_blank_values=True, strict_parsing=True):
        if key in result:
            previous = result[key]
            if isinstance(previous, list):
                previous.append(value)
            else:
                result[key] = [previous, value]
        else:
            result[key] = value
    return result


def _scalar(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(
        f"URL-encoded field {key!r} must be a scalar or list of scalars, "
        f"got {type(value).__name__}"
    )


def dumps(value: Any, *, pretty: bool = False) -> str:
    """Encode a flat mapping. There is one layout, so ``pretty`` is ignored."""
    if not isinstance(value, Mapping):
        raise TypeError(
            f"URL-encoded documents must be mappings, got {type(value).__name__}"
        )
    pairs = []
    for key, item in value.items():
        if item is None:
            continue
        if isinstance(item, (list, tuple)):
            pairs.extend((key, _scalar(key, v)) for v in item)
        else:
            pairs.append((key, _scalar(key, item)))
    return urlencode(pairs)


BACKEND = Backend(
    format=Format.URL,
    loads=loads,
    dumps=dumps,
    decode_errors=(ValueError, UnicodeDecodeError),
    encode_errors=(TypeError,),
)
