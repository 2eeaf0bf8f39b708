"""Schema exports."""

from .base import MarkdownText, SchemaBase, trusted
from .command import (
    LINE_BREAK,
    CommandDescription,
    CommandSpec,
    DetailLevel,
    ParameterDescription,
    TypeDescription,
)
from .formatting import HARD_BREAK, SEPARATOR, format_description, format_parameter

__all__ = [
    "MarkdownText",
    "SchemaBase",
    "trusted",
    "LINE_BREAK",
    "CommandDescription",
    "CommandSpec",
    "DetailLevel",
    "ParameterDescription",
    "TypeDescription",
    "HARD_BREAK",
    "SEPARATOR",
    "format_description",
    "format_parameter",
]
