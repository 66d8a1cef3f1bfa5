# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""JSON backend (standard library ``json``)."""

from __future__ import annotations

import json
from typing import Any

from anyserde.backends.base import Backend, Input, as_bytes_or_text
from anyserde.format.registry import Format


def loads(data: Input) -> Any:
    return json.loads(as_bytes_or_text(data))


def dumps(value: Any, *, pretty: bool = False) -> str:
    """Compact by default; two-space indentation when pretty."""
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


BACKEND = Backend(
    format=Format.JSON,
    loads=loads,
    dumps=dumps,
    # UnicodeDecodeError covers bytes that are not valid UTF-8/16/32
    decode_errors=(json.JSONDecodeError, UnicodeDecodeError, ValueError, RecursionError),
    encode_errors=(TypeError, ValueError),
)
