"""Tests for the tolerant descriptor parser."""

import pytest

from codehelp.exceptions import DefinitionParseError
from codehelp.parser import coerce_parameters, coerce_string_list, coerce_text, parse_definitions
from codehelp.schemas import HARD_BREAK, DetailLevel, TypeDescription


def _single(tree):
    descriptions = parse_definitions(tree, "test.yaml")
    assert len(descriptions) == 1
    return descriptions[0]


class TestCoercion:
    def test_string_list(self):
        assert coerce_string_list("a") == ["a"]
        assert coerce_string_list(["a", 3, None, "b"]) == ["a", "b"]
        assert coerce_string_list(5) is None
        assert coerce_string_list({"a": 1}) is None

    def test_text(self):
        assert coerce_text("x") == "x"
        assert coerce_text(3) is None
        assert coerce_text(["x"]) is None

    def test_parameters_scalar_values(self):
        params = coerce_parameters({"a": "help", "b": 5, "c": None, "d": True}, "src", "cmd")
        assert [(p.name, p.help.value) for p in params] == [
            ("a", "help"),
            ("b", "5"),
            ("c", ""),
            ("d", "true"),
        ]

    def test_parameters_not_a_mapping(self):
        assert coerce_parameters("note", "src", "cmd") is None
        assert coerce_parameters(["note"], "src", "cmd") is None


class TestParseDefinitions:
    def test_empty_document(self):
        assert parse_definitions(None) == []
        assert parse_definitions({}) == []

    def test_order_preserved(self):
        descriptions = parse_definitions({"c": None, "a": None, "b": None})
        assert [d.command for d in descriptions] == ["c", "a", "b"]

    def test_string_value_is_alias(self):
        desc = _single({"sine": "beep"})
        assert desc.command == "beep"
        assert desc.formatted_command[0].value == "beep ?"
        assert desc.help is None

    def test_null_value_is_empty_descriptor(self):
        desc = _single({"stop": None})
        assert desc.command == "stop"
        assert desc.formatted_command[0].value == "stop ?"

    def test_full_descriptor(self):
        desc = _single(
            {
                "play": {
                    "cmd": "`play note`",
                    "help": "Play a note",
                    "params": {"note": "Note to play"},
                    "returns": "node",
                    "examples": ["play 50", "play 60"],
                }
            }
        )
        assert desc.formatted_command[0].value == "`play note`"
        assert desc.help.value == "Play a note"
        assert [p.name for p in desc.parameters] == ["note"]
        assert desc.returns.value == "node"
        assert len(desc.examples) == 2

    @pytest.mark.parametrize("key", ["cmd", "formattedCommand"])
    def test_signature_synonyms(self, key):
        assert _single({"x": {key: ["a", 1, "b"]}}).formatted_command[1].value == "b"

    @pytest.mark.parametrize("key", ["return", "returns"])
    def test_returns_synonyms(self, key):
        assert _single({"x": {key: "r"}}).returns.value == "r"

    @pytest.mark.parametrize("key", ["help", "doc"])
    def test_help_synonyms(self, key):
        assert _single({"x": {key: "h"}}).help.value == "h"

    @pytest.mark.parametrize("key", ["parm", "param", "params", "parameters"])
    def test_parameter_synonyms(self, key):
        desc = _single({"x": {key: {"a": "A", "b": "B"}}})
        assert [p.name for p in desc.parameters] == ["a", "b"]
        assert desc.formatted_command[0].value == "x a b"

    @pytest.mark.parametrize("key", ["example", "examples"])
    def test_example_synonyms(self, key):
        assert len(_single({"x": {key: "play 50"}}).examples) == 1
        assert len(_single({"x": {key: ["a", 2, "b"]}}).examples) == 2

    def test_later_synonym_wins(self):
        assert _single({"x": {"help": "first", "doc": "second"}}).help.value == "second"

    def test_wrong_shapes_are_discarded(self):
        desc = _single(
            {
                "x": {
                    "returns": 42,
                    "help": ["not", "text"],
                    "cmd": 7,
                    "params": "note",
                    "examples": {"a": 1},
                    "unknown": "ignored",
                }
            }
        )
        assert desc.returns is None
        assert desc.help is None
        assert desc.parameters == ()
        assert desc.examples == ()
        assert desc.formatted_command[0].value == "x ?"

    def test_empty_parameters_mapping(self):
        assert _single({"x": {"params": {}}}).formatted_command[0].value == "x "

    def test_structured_parameter(self):
        desc = _single(
            {
                "sleep": {
                    "params": {
                        "beats": {
                            "help": "Beats to wait",
                            "default": 1,
                            "constraints": "must be zero or greater\n",
                            "type": "rational_pattern",
                            "editable": True,
                        },
                        "opts": {"doc": "Options", "editable": "yes", "type": "nonsense"},
                    }
                }
            }
        )
        beats, opts = desc.parameters
        assert beats.help.value == f"Beats to wait{HARD_BREAK}Default: 1{HARD_BREAK}must be zero or greater"
        assert beats.type is TypeDescription.RATIONAL_PATTERN
        assert beats.editable is True
        assert opts.help.value == "Options"
        assert opts.type is None
        assert opts.editable is False

    def test_parse_then_format_never_raises(self):
        tree = {
            "a": None,
            "b": "c",
            "d": {"params": {"x": {"default": None}}, "examples": "e"},
            "f": {"cmd": [], "help": ""},
        }
        for desc in parse_definitions(tree):
            assert desc.format(DetailLevel.FULL) is not None
            assert desc.formatted_command
            assert desc.format(DetailLevel.MINIMUM).value

    @pytest.mark.parametrize("value", [[], [1, None], ""])
    def test_empty_signature_is_synthesized(self, value):
        desc = _single({"beep": {"cmd": value, "params": {"note": "n"}}})
        assert [x.value for x in desc.formatted_command] == ["beep note"]
        assert desc.format(DetailLevel.MINIMUM).value == "beep note"


class TestParseErrors:
    def test_non_mapping_root(self):
        with pytest.raises(DefinitionParseError):
            parse_definitions(["play"], "list.yaml")

    def test_non_string_command_key(self):
        with pytest.raises(DefinitionParseError) as exc:
            parse_definitions({1: "play"}, "bad.yaml")
        assert "bad.yaml" in str(exc.value)
        assert "int" in str(exc.value)

    @pytest.mark.parametrize("value", [5, ["a"], 1.5, True])
    def test_invalid_command_value(self, value):
        with pytest.raises(DefinitionParseError) as exc:
            parse_definitions({"play": value}, "bad.yaml")
        assert exc.value.command == "play"

    def test_root_error_has_no_command(self):
        with pytest.raises(DefinitionParseError) as exc:
            parse_definitions("play", "bad.yaml")
        assert exc.value.command is None
        assert str(exc.value) == "Error loading command descriptions from bad.yaml: Invalid definition root type str"

    def test_non_string_property_key(self):
        with pytest.raises(DefinitionParseError, match="property key"):
            parse_definitions({"play": {3: "x"}}, "bad.yaml")

    def test_non_string_parameter_key(self):
        with pytest.raises(DefinitionParseError, match="parameter key"):
            parse_definitions({"play": {"params": {None: "x"}}}, "bad.yaml")
