# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for the RON reader and writer."""

import math

import pytest

from anyserde.backends.ron import RonDecodeError, dumps, loads


class TestReaderScalars:

    def test_bools_and_none(self):
        assert loads("true") is True
        assert loads("false") is False
        assert loads("None") is None
        assert loads("()") is None

    def test_integers(self):
        assert loads("42") == 42
        assert loads("-7") == -7
        assert loads("+3") == 3
        assert loads("1_000_000") == 1_000_000
        assert loads("0x2A") == 42
        assert loads("-0x2a") == -42
        assert loads("0o52") == 42
        assert loads("0b101010") == 42
        assert loads("0x_ff") == 255

    def test_floats(self):
        assert loads("4.5") == 4.5
        assert loads("-0.25") == -0.25
        assert loads("1e3") == 1000.0
        assert loads("2.5E-1") == 0.25
        assert isinstance(loads("1.0"), float)

    def test_special_floats(self):
        assert loads("inf") == math.inf
        assert loads("-inf") == -math.inf
        assert math.isnan(loads("NaN"))

    def test_strings(self):
        assert loads('"plain"') == "plain"
        assert loads(r'"tab\tquote\"slash\\"') == 'tab\tquote"slash\\'
        assert loads(r'"\u{1F600}"') == "\U0001F600"
        assert loads(r'"\u{1_F600}"') == "\U0001F600"
        assert loads(r'"\u0041"') == "A"
        assert loads(r'"é"') == "é"
        assert loads('"ünïcödé"') == "ünïcödé"

    def test_raw_strings(self):
        assert loads('r"no \\escapes"') == "no \\escapes"
        assert loads('r#"has "quotes""#') == 'has "quotes"'

    def test_chars(self):
        assert loads("'a'") == "a"
        assert loads(r"'\n'") == "\n"
        assert loads(r"'\''") == "'"


class TestReaderCompound:

    def test_list(self):
        assert loads("[1, 2, 3,]") == [1, 2, 3]
        assert loads("[]") == []

    def test_map(self):
        assert loads('{"a": 1, "b": [true]}') == {"a": 1, "b": [True]}
        assert loads("{1: \"one\", 2: \"two\",}") == {1: "one", 2: "two"}

    def test_anonymous_struct(self):
        assert loads("(x: 1, y: 2)") == {"x": 1, "y": 2}

    def test_named_struct(self):
        assert loads("Point(x: 1.5, y: -2,)") == {"x": 1.5, "y": -2}

    def test_tuple(self):
        assert loads("(1, \"two\", 3.0)") == [1, "two", 3.0]

    def test_option(self):
        assert loads("Some(5)") == 5
        assert loads("[Some(\"a\"), None]") == ["a", None]

    def test_enum_variants(self):
        assert loads("Red") == "Red"
        assert loads("Rgb(1, 2, 3)") == {"Rgb": [1, 2, 3]}
        assert loads("Named(\"x\")") == {"Named": "x"}

    def test_nested(self):
        doc = """
        Scene( // a scene
            materials: {
                "metal": (reflectivity: 1.0),
                "plastic": (reflectivity: 0.5),
            },
            entities: [
                (name: "hero", material: "metal"),
                (name: "monster", material: "plastic"),
            ],
        )
        """
        assert loads(doc) == {
            "materials": {
                "metal": {"reflectivity": 1.0},
                "plastic": {"reflectivity": 0.5},
            },
            "entities": [
                {"name": "hero", "material": "metal"},
                {"name": "monster", "material": "plastic"},
            ],
        }

    def test_comments_and_attributes(self):
        doc = """#![enable(implicit_some)]
        /* outer /* nested */ still comment */
        (a: 1) // trailing
        """
        assert loads(doc) == {"a": 1}

    def test_bytes_input(self):
        assert loads(b"(name: \"x\")") == {"name": "x"}


class TestReaderErrors:

    @pytest.mark.parametrize(
        "doc",
        [
            "",
            "(a: 1",
            "[1 2]",
            '"unterminated',
            "(a: 1) extra",
            "{(a: 1): 2}",
            "(a: 1, a: 2)",
            "/* open",
            "@",
            "-",
            "''",
            "0x_",
            "-0b__",
            r'"\u{}"',
            r'"\u{+41}"',
            r'"\u{ 41}"',
            r'"\u+041"',
            r'"\u{D800}"',
            r'"\uDFFF"',
            r'"\u{110000}"',
        ],
    )
    def test_malformed(self, doc):
        with pytest.raises(RonDecodeError):
            loads(doc)

    def test_position(self):
        with pytest.raises(RonDecodeError) as excinfo:
            loads("(\n  a: 1,\n  b: ?\n)")
        assert excinfo.value.lineno == 3
        assert excinfo.value.colno == 6
        assert "line 3 column 6" in str(excinfo.value)

    def test_is_value_error(self):
        assert issubclass(RonDecodeError, ValueError)

    def test_json_is_not_ron(self):
        with pytest.raises(RonDecodeError):
            loads('{"a": 1} {"b": 2}')


class TestWriter:

    def test_struct_compact(self):
        value = {"name": "Bilbo Baggins", "age": 111, "has_ring": True}
        assert dumps(value) == '(name:"Bilbo Baggins",age:111,has_ring:true)'

    def test_struct_pretty(self):
        value = {"name": "Bilbo Baggins", "age": 111, "has_ring": True}
        assert dumps(value, pretty=True) == (
            "(\n"
            '    name: "Bilbo Baggins",\n'
            "    age: 111,\n"
            "    has_ring: true,\n"
            ")"
        )

    def test_nested_pretty_indent(self):
        text = dumps({"friends": ["dwarves", "elves"]}, pretty=True)
        assert text == (
            "(\n"
            "    friends: [\n"
            '        "dwarves",\n'
            '        "elves",\n'
            "    ],\n"
            ")"
        )

    def test_non_identifier_keys_use_map(self):
        assert dumps({"two words": 1}) == '{"two words":1}'
        assert dumps({1: "one"}) == '{1:"one"}'

    def test_empty_containers(self):
        assert dumps({}) == "{}"
        assert dumps([]) == "[]"
        assert dumps([], pretty=True) == "[]"

    def test_scalars(self):
        assert dumps(None) == "None"
        assert dumps(False) == "false"
        assert dumps(3) == "3"
        assert dumps(2.0) == "2.0"
        assert dumps(math.inf) == "inf"
        assert dumps(-math.inf) == "-inf"
        assert dumps(math.nan) == "NaN"

    def test_string_escapes(self):
        assert dumps('say "hi"\n') == r'"say \"hi\"\n"'
        assert dumps("\x01") == r'"\u{1}"'

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="not RON serializable"):
            dumps({"blob": b"\x00"})

    def test_written_output_reads_back(self):
        value = {
            "name": "Gandalf",
            "age": 9000,
            "colors": ["Grey", "White"],
            "ratio": 0.5,
            "tags": {"the grey": True, "the white": None},
            "quote": 'Fly, you "fools"!\n',
        }
        assert loads(dumps(value)) == value
        assert loads(dumps(value, pretty=True)) == value
