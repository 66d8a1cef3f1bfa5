# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Format Registry -- the closed set of formats anyserde knows about.

Declaration order of :class:`Format` is the canonical order. It is the
order in which formats are probed when the input format is unknown and
the order in which stems are expanded into file names, so it must never
depend on anything but this module.

Order: TOML, JSON, YAML, RON, XML, URL
- TOML is the strictest grammar and rejects JSON and YAML documents.
- JSON comes before YAML because YAML accepts (almost) every JSON document.
- XML and URL-encoded forms come after the data languages. URL has no
  file extension, so it is only reached by probing or by name.
"""

from __future__ import annotations

from enum import Enum


class Format(Enum):
    """Serialization formats.

    Whether a format can actually be used depends on the installed
    backend libraries and on the ``ANYSERDE_FORMATS`` setting; see
    :meth:`is_supported` and :func:`enabled_formats`.
    """

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
    RON = "ron"
    XML = "xml"
    URL = "url"

    def __str__(self) -> str:
        return self.name

    @property
    def extensions(self) -> tuple[str, ...]:
        """Recognized file extensions, primary extension first."""
        return _EXTENSIONS[self]

    def is_supported(self) -> bool:
        """True if this format is enabled in the current configuration."""
        return self in enabled_formats()

    @classmethod
    def from_name(cls, name: str) -> Format:
        """Look up a format by name, case-insensitively.

        Raises:
            ValueError: If no format has that name.
        """
        key = name.strip().lower()
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise ValueError(f"Unknown format {name!r}")


# Lowercase, no dot. Primary extension first, then aliases.
_EXTENSIONS: dict[Format, tuple[str, ...]] = {
    Format.TOML: ("toml",),
    Format.JSON: ("json",),
    Format.YAML: ("yaml", "yml"),
    Format.RON: ("ron",),
    Format.XML: ("xml",),
    Format.URL: (),
}


def all_formats() -> tuple[Format, ...]:
    """Every known format in canonical order, enabled or not."""
    return tuple(Format)


def enabled_formats() -> tuple[Format, ...]:
    """Formats usable right now, in canonical order.

    A format is enabled when its backend library is importable and the
    ``ANYSERDE_FORMATS`` setting (if any) names it.
    """
    # Import here to avoid circular imports
    from anyserde.backends import is_available
    from anyserde.config import configured_formats

    configured = configured_formats()
    return tuple(
        fmt for fmt in Format
        if (configured is None or fmt in configured) and is_available(fmt)
    )


def extensions_of(format: Format) -> tuple[str, ...]:
    """Recognized extensions of a format (lowercase, primary first)."""
    return _EXTENSIONS[format]


def supported_extensions() -> list[str]:
    """Extensions of every enabled format, in canonical order."""
    return [ext for fmt in enabled_formats() for ext in _EXTENSIONS[fmt]]
