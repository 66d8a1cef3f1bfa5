# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Format backends.

Each backend wraps one format library behind the same two capabilities,
decode and encode. Backends are imported lazily, so a missing optional
library only disables its own format.
"""

from __future__ import annotations

import importlib

from anyserde.backends.base import Backend
from anyserde.errors import UnsupportedFormatError
from anyserde.format.registry import Format, enabled_formats

_MODULES: dict[Format, str] = {
    Format.TOML: "anyserde.backends.toml_",
    Format.JSON: "anyserde.backends.json_",
    Format.YAML: "anyserde.backends.yaml_",
    Format.RON: "anyserde.backends.ron",
    Format.XML: "anyserde.backends.xml_",
    Format.URL: "anyserde.backends.url",
}

# Third-party libraries each backend needs beyond the standard library
_REQUIRES: dict[Format, tuple[str, ...]] = {
    Format.TOML: ("tomli_w",),
    Format.JSON: (),
    Format.YAML: ("yaml",),
    Format.RON: (),
    Format.XML: ("xmltodict",),
    Format.URL: (),
}


def is_available(format: Format) -> bool:
    """Check if the libraries needed by a format's backend are installed."""
    for name in _REQUIRES[format]:
        try:
            importlib.import_module(name)
        except ImportError:
            return False
    return True


def get_backend(format: Format) -> Backend:
    """Return the backend of an enabled format.

    Raises:
        UnsupportedFormatError: If the format is not enabled.
    """
    if format not in enabled_formats():
        raise UnsupportedFormatError(format)
    return importlib.import_module(_MODULES[format]).BACKEND


__all__ = [
    "Backend",
    "get_backend",
    "is_available",
]
