# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
RON (Rusty Object Notation) reader and writer.

RON values map onto Python values as follows:

=====================================  ====================================
RON                                    Python
=====================================  ====================================
``true`` / ``false``                   ``bool``
``42``, ``-0x2A``, ``0o52``, ``1_000``     ``int``
``4.2``, ``1e3``, ``inf``, ``NaN``         ``float``
``"text"``, ``r#"raw"#``, ``'c'``          ``str``
``[a, b]``                             ``list``
``{key: value}``                       ``dict``
``(field: value)``, ``Name(field: v)``     ``dict`` (struct name dropped)
``(a, b)``                             ``list``
``Some(x)``                            ``x``
``None``, ``()``                         ``None``
``Variant``                            ``"Variant"``
``Variant(x)``, ``Variant(a, b)``          ``{"Variant": x}``, ``{"Variant": [a, b]}``
=====================================  ====================================

Comments (``//`` and nested ``/* */``), trailing commas and leading
``#![enable(...)]`` attributes are accepted.

On output, a ``dict`` whose keys are all identifiers is written as an
anonymous struct, any other ``dict`` as a map.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Optional

from anyserde.backends.base import Backend, Input, as_text
from anyserde.format.registry import Format


class RonDecodeError(ValueError):
    """Malformed RON input.

    Attributes:
        msg: Description of the problem.
        doc: The document being parsed.
        pos: Offset of the problem in ``doc``.
        lineno: 1-based line of ``pos``.
        colno: 1-based column of ``pos``.
    """

    def __init__(self, msg: str, doc: str, pos: int) -> None:
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = doc.count("\n", 0, pos) + 1
        self.colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(f"{msg}: line {self.lineno} column {self.colno} (char {pos})")


# =============================================================================
# Reader
# =============================================================================

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_RADIX_RE = re.compile(r"[+-]?0(?:x[0-9A-Fa-f_]+|o[0-7_]+|b[01_]+)")
_NUMBER_RE = re.compile(
    r"[+-]?(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d[\d_]*)?"
)
_UNICODE_RE = re.compile(r"[0-9A-Fa-f]{4}")
_BRACED_UNICODE_RE = re.compile(r"\{([0-9A-Fa-f][0-9A-Fa-f_]*)\}")
_WS = " \t\r\n"

_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
}


class _Reader:
    """Recursive-descent RON reader over a complete document."""

    def __init__(self, doc: str) -> None:
        self.doc = doc
        self.pos = 0

    def error(self, msg: str, pos: Optional[int] = None) -> RonDecodeError:
        return RonDecodeError(msg, self.doc, self.pos if pos is None else pos)

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.doc[i] if i < len(self.doc) else ""

    def expect(self, ch: str) -> None:
        self.skip_ws()
        if self.peek() != ch:
            found = repr(self.peek()) if self.peek() else "end of input"
            raise self.error(f"Expected {ch!r}, found {found}")
        self.pos += 1

    def skip_ws(self) -> None:
        doc = self.doc
        while self.pos < len(doc):
            ch = doc[self.pos]
            if ch in _WS:
                self.pos += 1
            elif doc.startswith("//", self.pos):
                end = doc.find("\n", self.pos)
                self.pos = len(doc) if end < 0 else end + 1
            elif doc.startswith("/*", self.pos):
                self._skip_block_comment()
            else:
                break

    def _skip_block_comment(self) -> None:
        start = self.pos
        depth = 0
        doc = self.doc
        while self.pos < len(doc):
            if doc.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif doc.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        raise self.error("Unterminated block comment", start)

    def skip_attributes(self) -> None:
        while True:
            self.skip_ws()
            if not self.doc.startswith("#![", self.pos):
                return
            end = self.doc.find("]", self.pos)
            if end < 0:
                raise self.error("Unterminated attribute")
            self.pos = end + 1

    def document(self) -> Any:
        self.skip_attributes()
        value = self.value()
        self.skip_ws()
        if self.pos != len(self.doc):
            raise self.error("Trailing characters")
        return value

    def value(self) -> Any:
        self.skip_ws()
        ch = self.peek()
        if not ch:
            raise self.error("Unexpected end of input")
        if ch == '"':
            return self.string()
        if ch == "r" and self.peek(1) in ('"', "#"):
            return self.raw_string()
        if ch == "'":
            return self.char()
        if ch == "[":
            return self.sequence()
        if ch == "{":
            return self.map()
        if ch == "(":
            return self.parenthesized(None)
        if ch in "+-.0123456789":
            return self.number()
        m = _IDENT_RE.match(self.doc, self.pos)
        if m:
            return self.identified(m)
        raise self.error(f"Unexpected character {ch!r}")

    def identified(self, m: re.Match) -> Any:
        name = m.group()
        self.pos = m.end()
        if name == "true":
            return True
        if name == "false":
            return False
        if name == "inf":
            return math.inf
        if name == "NaN":
            return math.nan
        if name == "None":
            return None
        self.skip_ws()
        if self.peek() != "(":
            # Unit struct or unit enum variant
            return name
        if name == "Some":
            self.pos += 1
            inner = self.value()
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
            self.expect(")")
            return inner
        return self.parenthesized(name)

    def _at_field(self) -> bool:
        """True if an ``identifier :`` pair starts at the current position."""
        m = _IDENT_RE.match(self.doc, self.pos)
        if not m:
            return False
        i = m.end()
        while i < len(self.doc) and self.doc[i] in _WS:
            i += 1
        return self.doc.startswith(":", i) and not self.doc.startswith("::", i)

    def parenthesized(self, name: Optional[str]) -> Any:
        self.expect("(")
        self.skip_ws()
        if self.peek() == ")":
            self.pos += 1
            return None if name is None else name
        if self._at_field():
            return self.struct_fields()
        items = self.items(")")
        if name is None:
            return items
        return {name: items[0] if len(items) == 1 else items}

    def struct_fields(self) -> dict:
        fields: dict = {}
        while True:
            self.skip_ws()
            if self.peek() == ")":
                self.pos += 1
                return fields
            m = _IDENT_RE.match(self.doc, self.pos)
            if not m:
                raise self.error("Expected field name")
            if m.group() in fields:
                raise self.error(f"Duplicate field {m.group()!r}")
            self.pos = m.end()
            self.expect(":")
            fields[m.group()] = self.value()
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != ")":
                raise self.error("Expected ',' or ')'")

    def items(self, close: str) -> list:
        items = []
        while True:
            self.skip_ws()
            if self.peek() == close:
                self.pos += 1
                return items
            items.append(self.value())
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != close:
                raise self.error(f"Expected ',' or {close!r}")

    def sequence(self) -> list:
        self.pos += 1
        return self.items("]")

    def map(self) -> dict:
        self.pos += 1
        result: dict = {}
        while True:
            self.skip_ws()
            if self.peek() == "}":
                self.pos += 1
                return result
            key_pos = self.pos
            key = self.value()
            if isinstance(key, list):
                key = tuple(key)
            try:
                hash(key)
            except TypeError:
                raise self.error("Map key is not hashable", key_pos) from None
            self.expect(":")
            result[key] = self.value()
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != "}":
                raise self.error("Expected ',' or '}'")

    def number(self) -> Any:
        start = self.pos
        sign = self.peek() if self.peek() in "+-" else ""
        for word, val in (("inf", math.inf), ("NaN", math.nan)):
            if sign and self.doc.startswith(word, start + 1):
                self.pos = start + len(sign) + len(word)
                return -val if sign == "-" else val
        m = _RADIX_RE.match(self.doc, start)
        if m:
            text = m.group().replace("_", "")
            # Prefix alone, e.g. 0x_
            if not text.lstrip("+-")[2:]:
                raise self.error("Invalid number", start)
            self.pos = m.end()
            return int(text, 0)
        m = _NUMBER_RE.match(self.doc, start)
        if not m or not any(c.isdigit() for c in m.group()):
            raise self.error("Invalid number", start)
        self.pos = m.end()
        text = m.group().replace("_", "")
        if any(c in text for c in ".eE"):
            return float(text)
        return int(text)

    def escape(self) -> str:
        start = self.pos
        self.pos += 1  # backslash
        ch = self.peek()
        if ch in _ESCAPES:
            self.pos += 1
            return _ESCAPES[ch]
        if ch == "x":
            digits = self.doc[self.pos + 1:self.pos + 3]
            if len(digits) != 2 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise self.error("Invalid \\x escape", start)
            self.pos += 3
            return chr(int(digits, 16))
        if ch == "u":
            if self.peek(1) == "{":
                m = _BRACED_UNICODE_RE.match(self.doc, self.pos + 1)
                digits = m.group(1).replace("_", "") if m else ""
                after = m.end() if m else self.pos
            else:
                m = _UNICODE_RE.match(self.doc, self.pos + 1)
                digits = m.group() if m else ""
                after = self.pos + 5
            if not digits or len(digits) > 6:
                raise self.error("Invalid \\u escape", start)
            code = int(digits, 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                raise self.error(f"Invalid code point U+{code:X}", start)
            self.pos = after
            return chr(code)
        raise self.error(f"Unknown escape {ch!r}", start)

    def string(self) -> str:
        start = self.pos
        self.pos += 1
        parts = []
        doc = self.doc
        while True:
            if self.pos >= len(doc):
                raise self.error("Unterminated string", start)
            ch = doc[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(parts)
            if ch == "\\":
                parts.append(self.escape())
            else:
                parts.append(ch)
                self.pos += 1

    def raw_string(self) -> str:
        start = self.pos
        self.pos += 1  # r
        hashes = 0
        while self.peek() == "#":
            hashes += 1
            self.pos += 1
        if self.peek() != '"':
            raise self.error("Invalid raw string", start)
        self.pos += 1
        terminator = '"' + "#" * hashes
        end = self.doc.find(terminator, self.pos)
        if end < 0:
            raise self.error("Unterminated raw string", start)
        text = self.doc[self.pos:end]
        self.pos = end + len(terminator)
        return text

    def char(self) -> str:
        start = self.pos
        self.pos += 1
        if self.peek() == "\\":
            ch = self.escape()
        elif self.peek() in ("", "'"):
            raise self.error("Empty character literal", start)
        else:
            ch = self.peek()
            self.pos += 1
        if self.peek() != "'":
            raise self.error("Unterminated character literal", start)
        self.pos += 1
        return ch


def loads(data: Input) -> Any:
    """Parse a complete RON document."""
    return _Reader(as_text(data)).document()


# =============================================================================
# Writer
# =============================================================================

_IDENT_FULL_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")


def _quote(s: str) -> str:
    out = ['"']
    for ch in s:
        if ch == '"':
            out.append('\\"')
        elif ch == "\\":
            out.append("\\\\")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = repr(x)
    if not any(c in text for c in ".e"):
        text += ".0"
    return text


class _Writer:
    def __init__(self, pretty: bool) -> None:
        self.pretty = pretty
        self.indent = "    "

    def write(self, value: Any, level: int = 0) -> str:
        if value is None:
            return "None"
        if value is True:
            return "true"
        if value is False:
            return "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _float(value)
        if isinstance(value, str):
            return _quote(value)
        if isinstance(value, Mapping):
            if value and all(isinstance(k, str) and _IDENT_FULL_RE.match(k) for k in value):
                return self._block("(", ")", list(value.items()), level, struct=True)
            return self._block("{", "}", list(value.items()), level, struct=False)
        if isinstance(value, (list, tuple)):
            return self._block("[", "]", list(value), level, struct=None)
        raise TypeError(f"Object of type {type(value).__name__} is not RON serializable")

    def _entry(self, entry: Any, level: int, struct: Optional[bool]) -> str:
        sep = ": " if self.pretty else ":"
        if struct is None:
            return self.write(entry, level)
        key, val = entry
        key_text = key if struct else self.write(key, level)
        return f"{key_text}{sep}{self.write(val, level)}"

    def _block(self, open_: str, close: str, entries: list, level: int, struct: Optional[bool]) -> str:
        if not entries:
            return open_ + close
        parts = [self._entry(e, level + 1, struct) for e in entries]
        if not self.pretty:
            return open_ + ",".join(parts) + close
        pad = self.indent * (level + 1)
        body = "".join(f"{pad}{p},\n" for p in parts)
        return f"{open_}\n{body}{self.indent * level}{close}"


def dumps(value: Any, *, pretty: bool = False) -> str:
    """Serialize a value tree as RON.

    Raises:
        TypeError: If the tree contains a value RON cannot represent.
    """
    return _Writer(pretty).write(value)


BACKEND = Backend(
    format=Format.RON,
    loads=loads,
    dumps=dumps,
    # Deep nesting exhausts the recursive-descent reader
    decode_errors=(RonDecodeError, UnicodeDecodeError, ValueError, RecursionError),
    encode_errors=(TypeError, ValueError),
)
