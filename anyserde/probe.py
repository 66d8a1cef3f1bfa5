# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Format Prober -- decode input whose format is not known up front.

Candidates are tried in order and the first one that decodes without
error wins; later candidates are never attempted. This is "first that
parses", not "most likely": a document valid in several grammars goes to
whichever comes first in the candidate list. A failed attempt is final for
that format, since decoding the same input again gives the same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from anyserde.backends.base import Input
from anyserde.codec import decode
from anyserde.errors import DecodeError, NoSuccessfulParseError, NoSupportedFormatsError
from anyserde.format.registry import Format, enabled_formats

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProbeOutcome:
    """Result of probing.

    Attributes:
        value: The decoded value (None when nothing succeeded).
        format: The format that decoded the input, or None.
        failures: ``(Format, DecodeError)`` for every rejected attempt,
            in attempt order.
    """

    value: Any = None
    format: Optional[Format] = None
    failures: tuple[tuple[Format, DecodeError], ...] = ()

    @property
    def ok(self) -> bool:
        return self.format is not None

    def unwrap(self) -> Any:
        """Return the value, or raise the aggregated failure."""
        if self.format is None:
            raise NoSuccessfulParseError(self.failures)
        return self.value


def probe(
    data: Input,
    candidates: Optional[Iterable[Format]] = None,
    *,
    into: Optional[Any] = None,
) -> ProbeOutcome:
    """Decode ``data`` with the first candidate format that accepts it.

    Args:
        data: A complete document, as text or bytes.
        candidates: Formats to try, in order. Defaults to every enabled
            format in Registry order.
        into: Optional target type; a tree that does not fit it counts
            as a rejection by that format.

    Returns:
        A :class:`ProbeOutcome`. Call :meth:`ProbeOutcome.unwrap` to get
        the value or raise :class:`NoSuccessfulParseError`.

    Raises:
        NoSupportedFormatsError: If the candidate list is empty. Nothing
            is attempted in that case.
        UnsupportedFormatError: If a candidate is not enabled.
    """
    formats = enabled_formats() if candidates is None else tuple(candidates)
    if not formats:
        raise NoSupportedFormatsError()

    failures: list[tuple[Format, DecodeError]] = []
    for fmt in formats:
        try:
            value = decode(data, fmt, into)
        except DecodeError as e:
            logger.debug("Input rejected by %s: %s", fmt, e.source)
            failures.append((fmt, e))
            continue
        logger.debug("Input decoded as %s", fmt)
        return ProbeOutcome(value=value, format=fmt, failures=tuple(failures))

    return ProbeOutcome(failures=tuple(failures))
