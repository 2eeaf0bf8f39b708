"""Command description schemas.

A ``CommandDescription`` is the normalized, immutable model of one
command's documentation. It is built exclusively through
``CommandDescription.from_spec`` so that every defaulting rule lives in one
place:

- ``parameters``, ``examples`` and ``formatted_command`` are always tuples,
  empty when no source data exists.
- A missing signature is synthesized from the command and its parameter
  names, or ``"<command> ?"`` when no parameters were given at all.
- Example blocks have trailing blank lines stripped, line endings
  normalized to ``LINE_BREAK`` and are wrapped in a fenced block.
- Every text value is trusted markdown.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple, Union

from .base import MarkdownText, SchemaBase, trusted

LINE_BREAK = "\r\n"
EXAMPLE_FENCE = "~~~"

_NEWLINE = re.compile(r"\r?\n")


class DetailLevel(IntEnum):
    """Verbosity tier for rendered help. Each level includes the one below."""

    OFF = 0
    MINIMUM = 1
    NO_EXAMPLES_NO_LINKS = 2
    FULL = 3

    @classmethod
    def parse(cls, value: Union[str, int, "DetailLevel"]) -> "DetailLevel":
        """Resolve a level from its name (case-insensitive) or number.

        Raises:
            ValueError: If the value names no detail level
        """
        if isinstance(value, bool):
            raise ValueError(f"Invalid detail level: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Invalid detail level: {value!r}")


class TypeDescription(str, Enum):
    """Value type accepted by a command parameter."""

    UNKNOWN = "UNKNOWN"
    ANY = "ANY"
    RATIONAL_PATTERN = "RATIONAL_PATTERN"
    CONTROL_PATTERN = "CONTROL_PATTERN"
    TIME_PATTERN = "TIME_PATTERN"

    @classmethod
    def parse(cls, value: object) -> Optional["TypeDescription"]:
        """Return the matching type tag, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls[value.strip().upper()]
        except KeyError:
            return None


class ParameterDescription(SchemaBase):
    name: str
    help: MarkdownText = MarkdownText()
    editable: bool = False
    type: Optional[TypeDescription] = None


@dataclass
class CommandSpec:
    """Builder configuration for ``CommandDescription.from_spec``.

    Attributes:
        command: Lookup key and identifier matched against cursor text.
        formatted_command: Signature line(s). Default None, meaning
            "synthesize from command and parameters"; an empty
            signature is treated the same way.
        parameters: Ordered parameters. Default None, meaning "none given";
            an empty list means "given, but empty" and changes the
            synthesized signature from ``"<command> ?"`` to ``"<command> "``.
        returns: Return value prose. Default None (absent).
        help: General prose. Default None (absent).
        examples: One example or a list of them. Default None (no examples).
    """

    command: str
    formatted_command: Optional[Union[str, Sequence[str]]] = None
    parameters: Optional[Sequence[ParameterDescription]] = None
    returns: Optional[str] = None
    help: Optional[str] = None
    examples: Optional[Union[str, Sequence[str]]] = None


def _signature_lines(spec: CommandSpec) -> List[str]:
    formatted = spec.formatted_command
    if not formatted:
        if spec.parameters is None:
            return [f"{spec.command} ?"]
        names = " ".join(p.name for p in spec.parameters)
        return [f"{spec.command} {names}"]
    if isinstance(formatted, str):
        return [formatted]
    return list(formatted)


def _example_block(example: str) -> MarkdownText:
    lines = _NEWLINE.split(example)
    while len(lines) > 1 and not lines[-1].strip():
        lines.pop()
    body = LINE_BREAK.join(lines)
    return trusted(f"{EXAMPLE_FENCE}{LINE_BREAK}{body}{LINE_BREAK}{EXAMPLE_FENCE}{LINE_BREAK}")


class CommandDescription(SchemaBase):
    command: str
    formatted_command: Tuple[MarkdownText, ...] = ()
    parameters: Tuple[ParameterDescription, ...] = ()
    returns: Optional[MarkdownText] = None
    help: Optional[MarkdownText] = None
    examples: Tuple[MarkdownText, ...] = ()

    @classmethod
    def from_spec(cls, spec: CommandSpec) -> "CommandDescription":
        """Build a normalized description from a builder configuration."""
        parameters = tuple(
            p.model_copy(update={"help": trusted(p.help.value)}) for p in (spec.parameters or ())
        )

        examples = spec.examples
        if examples is None:
            examples = []
        elif isinstance(examples, str):
            examples = [examples]

        return cls(
            command=spec.command,
            formatted_command=tuple(trusted(line) for line in _signature_lines(spec)),
            parameters=parameters,
            returns=trusted(spec.returns) if spec.returns is not None else None,
            help=trusted(spec.help) if spec.help is not None else None,
            examples=tuple(_example_block(x) for x in examples),
        )

    def format(self, detail_level: DetailLevel, include_signature: bool = True) -> Optional[MarkdownText]:
        """Render this description at the requested detail level.

        Returns None for ``DetailLevel.OFF``.
        """
        from .formatting import format_description

        return format_description(self, detail_level, include_signature)

    def signature_text(self) -> str:
        """Plain-text signature with inline-code backticks removed."""
        return LINE_BREAK.join(line.value.replace("`", "") for line in self.formatted_command)

    @property
    def editable_parameters(self) -> Tuple[ParameterDescription, ...]:
        return tuple(p for p in self.parameters if p.editable)
