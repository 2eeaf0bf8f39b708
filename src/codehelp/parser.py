"""Tolerant parser for user-authored command descriptors.

The decoded tree maps command names to either a string (an alias whose
true command name is that string) or a mapping of descriptor properties.
Property names are case-sensitive and several synonyms are accepted:

    cmd / formattedCommand          signature line(s)
    return / returns                return value prose
    help / doc                      general prose
    parm / param / params / parameters
                                    mapping of parameter name -> help
    example / examples              one example or a list of them

Unrecognized properties are ignored, and a recognized property whose value
has the wrong shape is discarded. Only non-string keys and command values
that are neither a string nor a mapping are fatal.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

from codehelp.exceptions import DefinitionParseError
from codehelp.schemas import (
    HARD_BREAK,
    CommandDescription,
    CommandSpec,
    ParameterDescription,
    TypeDescription,
    trusted,
)

SIGNATURE_KEYS = ("cmd", "formattedCommand")
RETURNS_KEYS = ("return", "returns")
HELP_KEYS = ("help", "doc")
PARAMETER_KEYS = ("parm", "param", "params", "parameters")
EXAMPLE_KEYS = ("example", "examples")


def _type_name(value: Any) -> str:
    return type(value).__name__


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def coerce_string_list(value: Any) -> Optional[List[str]]:
    """A string or a sequence of strings; non-strings in a sequence are dropped."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [x for x in value if isinstance(x, str)]
    return None


def coerce_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _parameter_from_mapping(name: str, props: Mapping) -> ParameterDescription:
    """Read a structured parameter entry.

    Recognizes ``help``/``doc``, ``default``, ``constraints``, ``type`` and
    ``editable``; anything else is ignored.
    """
    lines = []
    for key in HELP_KEYS:
        if isinstance(props.get(key), str):
            lines.append(props[key])
            break
    if "default" in props:
        lines.append(f"Default: {_as_text(props['default'])}")
    constraints = props.get("constraints")
    if isinstance(constraints, str) and constraints.strip():
        lines.append(constraints.strip())
    elif isinstance(constraints, (list, tuple)) and constraints:
        lines.append(", ".join(_as_text(x) for x in constraints))

    editable = props.get("editable")
    return ParameterDescription(
        name=name,
        help=trusted(HARD_BREAK.join(lines)),
        editable=editable if isinstance(editable, bool) else False,
        type=TypeDescription.parse(props.get("type")),
    )


def coerce_parameters(value: Any, source: str, command: str) -> Optional[List[ParameterDescription]]:
    """Mapping of parameter name -> help text (or structured entry).

    Duplicate names keep the last entry.

    Raises:
        DefinitionParseError: If a parameter name is not a string
    """
    if not isinstance(value, Mapping):
        return None
    parameters: Dict[str, ParameterDescription] = {}
    for name, props in value.items():
        if not isinstance(name, str):
            raise DefinitionParseError(
                source, f"Invalid parameter key type {_type_name(name)}", command=command
            )
        if isinstance(props, Mapping):
            parameters[name] = _parameter_from_mapping(name, props)
        else:
            parameters[name] = ParameterDescription(name=name, help=trusted(_as_text(props)))
    return list(parameters.values())


def _string_list_field(value: Any, source: str, command: str) -> Optional[List[str]]:
    return coerce_string_list(value)


def _text_field(value: Any, source: str, command: str) -> Optional[str]:
    return coerce_text(value)


FieldCoercer = Callable[[Any, str, str], Any]

# property name -> (CommandSpec attribute, coercer)
PROPERTY_FIELDS: Dict[str, Tuple[str, FieldCoercer]] = {
    **{key: ("formatted_command", _string_list_field) for key in SIGNATURE_KEYS},
    **{key: ("returns", _text_field) for key in RETURNS_KEYS},
    **{key: ("help", _text_field) for key in HELP_KEYS},
    **{key: ("parameters", coerce_parameters) for key in PARAMETER_KEYS},
    **{key: ("examples", _string_list_field) for key in EXAMPLE_KEYS},
}


def parse_descriptor(command: str, descriptor: Optional[Mapping], source: str) -> CommandSpec:
    """Turn one descriptor mapping into a builder configuration.

    A later synonym overrides an earlier one; a badly shaped value leaves
    the field at its default.

    Raises:
        DefinitionParseError: If a property key is not a string
    """
    spec = CommandSpec(command=command)
    for prop, value in (descriptor or {}).items():
        if not isinstance(prop, str):
            raise DefinitionParseError(
                source, f"Invalid property key type {_type_name(prop)}", command=command
            )
        if prop not in PROPERTY_FIELDS:
            continue
        field_name, coerce = PROPERTY_FIELDS[prop]
        coerced = coerce(value, source, command)
        if coerced is not None:
            setattr(spec, field_name, coerced)
    return spec


def parse_definitions(tree: Any, source: str = "<memory>") -> List[CommandDescription]:
    """Parse a decoded definition tree into command descriptions.

    Output order follows the tree's iteration order. An empty document
    (``None``) yields no descriptions.

    Raises:
        DefinitionParseError: On non-string keys or an invalid command value
    """
    if tree is None:
        return []
    if not isinstance(tree, Mapping):
        raise DefinitionParseError(source, f"Invalid definition root type {_type_name(tree)}")

    descriptions = []
    for command, value in tree.items():
        if not isinstance(command, str):
            raise DefinitionParseError(source, f"Invalid command key type {_type_name(command)}")
        if isinstance(value, str):
            spec = CommandSpec(command=value)
        elif value is None or isinstance(value, Mapping):
            spec = parse_descriptor(command, value, source)
        else:
            raise DefinitionParseError(
                source, f"Invalid command description value type {_type_name(value)}", command=command
            )
        descriptions.append(CommandDescription.from_spec(spec))
    return descriptions
