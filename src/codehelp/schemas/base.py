"""Common schema utilities and base classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel):
    """Base model with common config for codehelp schemas.

    Schema objects are immutable once constructed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MarkdownText(SchemaBase):
    """Formatted text handed to the host rendering surface.

    Every value produced by codehelp is trusted, i.e. the host may render
    its markup (links, inline code) without sanitizing it first.
    """

    value: str = ""
    is_trusted: bool = True

    def __str__(self) -> str:
        return self.value


def trusted(value: str) -> MarkdownText:
    """Wrap plain text as trusted markdown."""
    return MarkdownText(value=value, is_trusted=True)
