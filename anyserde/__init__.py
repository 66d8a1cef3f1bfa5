# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
anyserde -- format-agnostic serialization for JSON, YAML, TOML, RON, XML
and URL-encoded forms.

The format is given explicitly, taken from a file name, or found by trying
every enabled format until one decodes.

Quick start::

    import anyserde
    from anyserde import Format

    anyserde.from_str('{"a": 1}', Format.JSON)      # {'a': 1}
    anyserde.from_str_any("a = 1")                 # {'a': 1} (TOML)
    settings = anyserde.from_file_stem("settings", into=Settings)
    anyserde.to_file("house.yaml", house)
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from anyserde.de import (
    detect_file_format,
    from_file,
    from_file_stem,
    from_reader,
    from_reader_any,
    from_slice,
    from_slice_any,
    from_str,
    from_str_any,
)
from anyserde.errors import (
    AnySerdeError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    FileAccessError,
    FormatError,
    NoMatchingFileError,
    NoSuccessfulParseError,
    NoSupportedFormatsError,
    UnresolvedFormatError,
    UnsupportedExtensionError,
    UnsupportedFormatError,
)
from anyserde.format import (
    Format,
    StemCandidate,
    enabled_formats,
    expand_stem,
    extensions_of,
    guess_format,
    guess_format_from_extension,
    resolve_extension,
    supported_extensions,
)
from anyserde.probe import ProbeOutcome, probe
from anyserde.ser import (
    to_file,
    to_file_pretty,
    to_string,
    to_string_pretty,
    to_vec,
    to_vec_pretty,
    to_writer,
    to_writer_pretty,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Deserialization
    "from_str",
    "from_slice",
    "from_reader",
    "from_str_any",
    "from_slice_any",
    "from_reader_any",
    "from_file",
    "from_file_stem",
    "detect_file_format",
    # Serialization
    "to_string",
    "to_string_pretty",
    "to_vec",
    "to_vec_pretty",
    "to_writer",
    "to_writer_pretty",
    "to_file",
    "to_file_pretty",
    # Formats
    "Format",
    "enabled_formats",
    "extensions_of",
    "supported_extensions",
    "resolve_extension",
    "guess_format",
    "guess_format_from_extension",
    "expand_stem",
    "StemCandidate",
    # Probing
    "probe",
    "ProbeOutcome",
    # Errors
    "AnySerdeError",
    "ConfigurationError",
    "UnresolvedFormatError",
    "UnsupportedFormatError",
    "UnsupportedExtensionError",
    "NoSupportedFormatsError",
    "FormatError",
    "DecodeError",
    "EncodeError",
    "NoSuccessfulParseError",
    "FileAccessError",
    "NoMatchingFileError",
    # Version
    "__version__",
]
