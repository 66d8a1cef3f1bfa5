# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
XML backend (xmltodict).

A document is a single root element; its name is not part of the value.
Decoding returns the root's content, encoding wraps the value in a
``<root>`` element. Child elements become dict entries, repeated
elements become lists, ``@name`` keys are attributes and ``#text`` is
mixed text. Every leaf comes back as a string (or None for an empty
element), so typed targets are converted by the model layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from anyserde.backends.base import Backend, Input, as_bytes_or_text
from anyserde.format.registry import Format

ROOT = "root"


def loads(data: Input) -> Any:
    document = xmltodict.parse(as_bytes_or_text(data))
    # Exactly one root element in a well-formed document
    (content,) = document.values()
    return content


def _stringify(value: Any) -> Any:
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"XML element names must be strings, got {key!r}")
        return {k: _stringify(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify(v) for v in value]
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return repr(value)
    raise TypeError(f"Object of type {type(value).__name__} is not XML serializable")


def dumps(value: Any, *, pretty: bool = False) -> str:
    """Encode a mapping as the children of a ``<root>`` element."""
    if not isinstance(value, Mapping):
        raise TypeError(
            f"XML documents need a mapping of child elements, got {type(value).__name__}"
        )
    return xmltodict.unparse({ROOT: _stringify(value)}, pretty=pretty, indent="  ")


BACKEND = Backend(
    format=Format.XML,
    loads=loads,
    dumps=dumps,
    decode_errors=(ExpatError, UnicodeDecodeError, ValueError, RecursionError),
    encode_errors=(TypeError, ValueError),
)
