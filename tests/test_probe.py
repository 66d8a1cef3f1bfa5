# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for probing input against candidate formats."""

import logging
from dataclasses import dataclass

import pytest

from anyserde import from_str, from_str_any
from anyserde.errors import (
    DecodeError,
    NoSuccessfulParseError,
    NoSupportedFormatsError,
    UnsupportedFormatError,
)
from anyserde.format.registry import Format
from anyserde.probe import ProbeOutcome, probe


@dataclass
class Hobbit:
    name: str
    age: int
    has_ring: bool


YAML_ONLY = b"name: Bilbo\nage: 50\n"
NEITHER = b"key: [unclosed"


class TestProbeSuccess:

    def test_yaml_but_not_json(self):
        outcome = probe(YAML_ONLY, [Format.JSON, Format.YAML])
        assert outcome.ok
        assert outcome.format == Format.YAML
        assert outcome.value == {"name": "Bilbo", "age": 50}

    def test_rejections_before_success_are_kept(self):
        outcome = probe(YAML_ONLY, [Format.JSON, Format.YAML])
        assert [fmt for fmt, _ in outcome.failures] == [Format.JSON]

    def test_first_success_wins(self):
        # Valid JSON is valid YAML too; the candidate order decides
        outcome = probe('{"a": 1}', [Format.YAML, Format.JSON])
        assert outcome.format == Format.YAML
        assert outcome.failures == ()

    def test_short_circuits(self):
        outcome = probe('{"a": 1}', [Format.JSON, Format.YAML])
        assert outcome.format == Format.JSON
        assert outcome.unwrap() == {"a": 1}

    def test_empty_input_is_success_when_library_accepts(self):
        outcome = probe("", [Format.JSON, Format.YAML])
        assert outcome.format == Format.YAML
        assert outcome.value is None

    def test_default_candidates_are_enabled_formats(self):
        outcome = probe('{"a": [1, 2]}')
        assert outcome.format == Format.JSON
        assert [fmt for fmt, _ in outcome.failures] == [Format.TOML]

    def test_toml_probed_first(self):
        assert probe("a = 1").format == Format.TOML

    def test_typed_mismatch_moves_on(self):
        text = "(name: \"Bilbo\", age: 50, has_ring: false)"
        outcome = probe(text, [Format.YAML, Format.RON], into=Hobbit)
        assert outcome.format == Format.RON
        assert outcome.value == Hobbit(name="Bilbo", age=50, has_ring=False)


class TestProbeFailure:

    def test_single_candidate_failure(self):
        outcome = probe(NEITHER, [Format.JSON])
        assert not outcome.ok
        assert len(outcome.failures) == 1
        fmt, error = outcome.failures[0]
        assert fmt == Format.JSON
        assert isinstance(error, DecodeError)

    def test_failures_in_attempt_order(self):
        outcome = probe(NEITHER, [Format.JSON, Format.YAML])
        assert [fmt for fmt, _ in outcome.failures] == [Format.JSON, Format.YAML]

    def test_unwrap_raises_aggregate(self):
        outcome = probe(NEITHER, [Format.JSON, Format.YAML])
        with pytest.raises(NoSuccessfulParseError) as excinfo:
            outcome.unwrap()
        assert excinfo.value.formats == (Format.JSON, Format.YAML)
        assert "JSON" in str(excinfo.value)

    def test_empty_candidates(self):
        with pytest.raises(NoSupportedFormatsError):
            probe('{"valid": "json"}', [])

    def test_nothing_enabled(self, only_formats):
        only_formats()
        with pytest.raises(NoSupportedFormatsError):
            probe("a = 1")

    def test_disabled_candidate(self, only_formats):
        only_formats("json")
        with pytest.raises(UnsupportedFormatError):
            probe("a: 1", [Format.JSON, Format.YAML])

    @pytest.mark.parametrize(
        "text",
        [
            "2001-13-01",  # YAML timestamp with an impossible month
            "0x_",  # radix prefix without digits
            "[" * 100_000,  # deeper than the recursive decoders go
        ],
    )
    def test_library_value_errors_are_recorded(self, text):
        with pytest.raises(NoSuccessfulParseError) as excinfo:
            from_str_any(text)
        assert excinfo.value.formats == tuple(Format)
        for _, error in excinfo.value.failures:
            assert isinstance(error, DecodeError)

    def test_failure_outcome_defaults(self):
        outcome = ProbeOutcome()
        assert not outcome.ok
        assert outcome.value is None


class TestSingleFormatBuild:
    """With one format enabled, probing is the fixed-format call."""

    def test_success_matches_fixed_format(self, only_formats):
        only_formats("yaml")
        text = "name: Bilbo\nfriends: [dwarves]\n"
        assert from_str_any(text) == from_str(text, Format.YAML)

    def test_failure_carries_the_fixed_format_error(self, only_formats):
        only_formats("json")
        with pytest.raises(DecodeError) as fixed:
            from_str("{", Format.JSON)
        with pytest.raises(NoSuccessfulParseError) as probed:
            from_str_any("{")
        ((fmt, error),) = probed.value.failures
        assert fmt == Format.JSON
        assert str(error) == str(fixed.value)


class TestLogging:

    def test_attempts_are_debug_records(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="anyserde"):
            probe(YAML_ONLY, [Format.JSON, Format.YAML])
        assert [r.levelno for r in caplog.records] == [logging.DEBUG, logging.DEBUG]
        assert "JSON" in caplog.records[0].getMessage()

    def test_failures_are_raised_not_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="anyserde"):
            with pytest.raises(NoSuccessfulParseError):
                from_str_any(NEITHER)
        assert caplog.records == []

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("anyserde").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
