"""Detail-level rendering of command descriptions."""

from __future__ import annotations

from typing import List, Optional

from .base import MarkdownText, trusted
from .command import LINE_BREAK, CommandDescription, DetailLevel, ParameterDescription

# Markdown hard line break
HARD_BREAK = "    " + LINE_BREAK
SEPARATOR = f"{LINE_BREAK}- - -{LINE_BREAK}{LINE_BREAK}"


def format_parameter(parameter: ParameterDescription) -> str:
    parts = [f"`{parameter.name}`"]
    if parameter.type is not None:
        parts.append(f"`{parameter.type.name}`")
    if parameter.help.value:
        parts.append(parameter.help.value)
    return " ".join(parts)


class _Document:
    """Accumulates sections, inserting separators only between content."""

    def __init__(self) -> None:
        self._chunks: List[str] = []

    def __bool__(self) -> bool:
        return any(self._chunks)

    def add(self, text: str, separator: str = SEPARATOR) -> None:
        if not text:
            return
        if self:
            self._chunks.append(separator)
        self._chunks.append(text)

    def render(self) -> MarkdownText:
        return trusted("".join(self._chunks))


def format_description(
    description: CommandDescription,
    detail_level: DetailLevel,
    include_signature: bool = True,
) -> Optional[MarkdownText]:
    """Render ``description`` at ``detail_level``.

    Levels are strictly additive, so the output of a lower level is always a
    prefix of the output of a higher one.
    """
    if detail_level == DetailLevel.OFF:
        return None

    doc = _Document()
    if include_signature:
        doc.add(HARD_BREAK.join(line.value for line in description.formatted_command))
    if detail_level == DetailLevel.MINIMUM:
        return doc.render()

    if description.help is not None:
        doc.add(description.help.value)
    doc.add(HARD_BREAK.join(format_parameter(p) for p in description.parameters))
    if description.returns is not None:
        doc.add(f"Returns: {description.returns.value}", separator=LINE_BREAK + LINE_BREAK)
    if detail_level == DetailLevel.NO_EXAMPLES_NO_LINKS:
        return doc.render()

    if description.examples:
        examples = HARD_BREAK.join(x.value for x in description.examples)
        doc.add(f"Examples:{LINE_BREAK}{LINE_BREAK}{examples}")
    return doc.render()
