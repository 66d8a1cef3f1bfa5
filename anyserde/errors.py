# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Exception hierarchy for anyserde.

Every error raised by the library derives from :class:`AnySerdeError`, so
callers that do not care about the cause can catch a single type. The
subclasses separate the cases a caller usually wants to tell apart:

- the format could not be determined (:class:`UnresolvedFormatError`)
- a format library rejected the input or value (:class:`FormatError`)
- every probed format rejected the input (:class:`NoSuccessfulParseError`)
- a file could not be opened, read or written (:class:`FileAccessError`)
- no file exists for a stem (:class:`NoMatchingFileError`)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from anyserde.format.registry import Format


class AnySerdeError(Exception):
    """Base type for all exceptions raised by anyserde."""


class ConfigurationError(AnySerdeError):
    """The enabled-format configuration is invalid."""


# =============================================================================
# Format resolution
# =============================================================================


class UnresolvedFormatError(AnySerdeError):
    """No usable format could be determined for an operation."""


class UnsupportedFormatError(UnresolvedFormatError):
    """The requested format is known but not enabled."""

    def __init__(self, format: Format) -> None:
        self.format = format
        super().__init__(f"Format {format} not supported")


class UnsupportedExtensionError(UnresolvedFormatError):
    """The file extension does not map to any enabled format."""

    def __init__(self, extension: str, path: Optional[os.PathLike | str] = None) -> None:
        self.extension = extension
        self.path = Path(path) if path is not None else None
        if extension:
            message = f"File extension {extension!r} not supported"
        else:
            message = "File has no extension"
        if self.path is not None:
            message = f"{message}: {self.path}"
        super().__init__(message)


class NoSupportedFormatsError(UnresolvedFormatError):
    """The candidate list was empty, so nothing could be attempted."""

    def __init__(self) -> None:
        super().__init__("No supported formats to try")


# =============================================================================
# Format library failures
# =============================================================================


class FormatError(AnySerdeError):
    """A format library failed to decode or encode.

    Attributes:
        format: The format whose library produced the error.
        operation: ``"decode"`` or ``"encode"``.
        source: The underlying library exception (also ``__cause__``).
    """

    operation = "process"

    def __init__(self, format: Format, source: BaseException) -> None:
        self.format = format
        self.source = source
        super().__init__(f"{format} {self.operation} error: {source}")


class DecodeError(FormatError):
    """Input could not be decoded with a format (or into the target type)."""

    operation = "decode"


class EncodeError(FormatError):
    """A value could not be encoded with a format."""

    operation = "encode"


class NoSuccessfulParseError(AnySerdeError):
    """Every candidate format failed to decode the input.

    Attributes:
        failures: ``(Format, DecodeError)`` pairs in attempt order.
    """

    def __init__(self, failures: Sequence[tuple[Format, DecodeError]]) -> None:
        self.failures = tuple(failures)
        lines = ["No format was able to parse the source"]
        for fmt, error in self.failures:
            lines.append(f"  {fmt}: {error.source}")
        super().__init__("\n".join(lines))

    @property
    def formats(self) -> tuple[Format, ...]:
        """Formats that were attempted, in order."""
        return tuple(fmt for fmt, _ in self.failures)


# =============================================================================
# Files
# =============================================================================


class FileAccessError(AnySerdeError):
    """A file could not be opened, read or written.

    The originating :class:`OSError` is chained as ``__cause__``.
    """

    def __init__(self, path: os.PathLike | str, source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        reason = source.strerror or str(source)
        super().__init__(f"IO error on {self.path}: {reason}")


class NoMatchingFileError(AnySerdeError):
    """None of the file names expanded from a stem exist."""

    def __init__(self, stem: os.PathLike | str, candidates: Sequence[Path]) -> None:
        self.stem = Path(stem)
        self.candidates = tuple(candidates)
        if self.candidates:
            tried = ", ".join(str(p) for p in self.candidates)
            message = f"No file found for stem {self.stem} (tried {tried})"
        else:
            message = f"No file found for stem {self.stem} (no supported formats)"
        super().__init__(message)
