# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Enabled-format configuration.

The set of usable formats is the set of installed backends, optionally
narrowed by the ``ANYSERDE_FORMATS`` environment variable::

    ANYSERDE_FORMATS=json,yaml   # only JSON and YAML
    ANYSERDE_FORMATS=            # nothing enabled

The variable is read on every call.
"""

from __future__ import annotations

import os
from typing import Optional

from anyserde.errors import ConfigurationError
from anyserde.format.registry import Format

ENV_VAR = "ANYSERDE_FORMATS"


def parse_format_list(value: str) -> frozenset[Format]:
    """Parse a comma separated list of format names.

    Raises:
        ConfigurationError: If a name is not a known format.
    """
    formats = set()
    for item in value.split(","):
        if not item.strip():
            continue
        try:
            formats.add(Format.from_name(item))
        except ValueError as e:
            known = ", ".join(f.value for f in Format)
            raise ConfigurationError(
                f"{ENV_VAR}: unknown format {item.strip()!r} (known: {known})"
            ) from e
    return frozenset(formats)


def configured_formats() -> Optional[frozenset[Format]]:
    """Formats named by ``ANYSERDE_FORMATS``, or None when it is unset."""
    value = os.environ.get(ENV_VAR)
    if value is None:
        return None
    return parse_format_list(value)
