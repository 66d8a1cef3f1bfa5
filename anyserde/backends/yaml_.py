# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
YAML backend (PyYAML).

Only the safe loader and dumper are used: no Python-specific tags are
produced or accepted.
"""

from __future__ import annotations

from typing import Any

import yaml

from anyserde.backends.base import Backend, Input, as_bytes_or_text
from anyserde.format.registry import Format


def loads(data: Input) -> Any:
    return yaml.safe_load(as_bytes_or_text(data))


def dumps(value: Any, *, pretty: bool = False) -> str:
    """Block style output. YAML has a single layout, so ``pretty`` is accepted and ignored."""
    return yaml.safe_dump(
        value,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


BACKEND = Backend(
    format=Format.YAML,
    loads=loads,
    dumps=dumps,
    # PyYAML raises ValueError for impossible timestamps and bare radix prefixes
    decode_errors=(yaml.YAMLError, UnicodeDecodeError, ValueError, RecursionError),
    encode_errors=(yaml.YAMLError, TypeError),
)
