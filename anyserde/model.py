# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Bridge between typed Python objects and the plain value trees backends use.

Encoding normalizes a value with :func:`to_builtins`; decoding converts a
decoded tree into a target type with :func:`from_builtins`.

Supported targets, in lookup order:
- ``None``: the plain tree is returned unchanged.
- A class with a ``from_dict`` classmethod: called with the decoded mapping.
- Anything pydantic can validate (dataclasses, ``BaseModel`` subclasses,
  ``list[int]``, ``dict[str, float]``, ...): validated with a ``TypeAdapter``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any, Optional

import numpy as np
from pydantic import BaseModel, TypeAdapter, ValidationError

# Errors a target type may raise when the decoded tree does not fit it
CONVERSION_ERRORS: tuple[type[BaseException], ...] = (
    ValidationError,
    ValueError,
    TypeError,
    KeyError,
)


def to_builtins(value: Any) -> Any:
    """Normalize a value into dicts, lists and scalars.

    - ``to_dict()`` objects and pydantic models are dumped to dicts
    - dataclass instances become dicts of their fields
    - ``Enum`` members become their values
    - NumPy scalars and arrays become Python scalars and lists
    - tuples and sets become lists, paths become strings

    Dates, times and bytes are left alone; formats that support them
    natively (YAML, TOML) encode them, the others raise an encode error.
    """
    # Before the scalar check: IntEnum and StrEnum members are ints and strs
    if isinstance(value, Enum):
        return to_builtins(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, BaseModel):
        return to_builtins(value.model_dump())
    if hasattr(value, "to_dict") and callable(value.to_dict):
        return to_builtins(value.to_dict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_builtins(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {to_builtins(k): to_builtins(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_builtins(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return [to_builtins(v) for v in sorted(value, key=repr)]
    if isinstance(value, PurePath):
        return str(value)
    return value


def from_builtins(data: Any, into: Optional[Any] = None) -> Any:
    """Convert a decoded value tree into ``into``.

    Raises:
        One of :data:`CONVERSION_ERRORS` if the tree does not fit the target.
    """
    if into is None:
        return data
    from_dict = getattr(into, "from_dict", None)
    if isinstance(into, type) and callable(from_dict) and not issubclass(into, BaseModel):
        if not isinstance(data, Mapping):
            raise TypeError(
                f"{into.__name__} expects a mapping, got {type(data).__name__}"
            )
        return from_dict(data)
    return TypeAdapter(into).validate_python(data)
