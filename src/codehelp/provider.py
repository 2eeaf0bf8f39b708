"""Hover, completion and reload operations over the command registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from codehelp.config import CodeHelpConfig
from codehelp.definition_loader import DefinitionSource, load_definition_source
from codehelp.exceptions import CodeHelpError
from codehelp.parser import parse_definitions
from codehelp.registry import CommandRegistry
from codehelp.schemas import CommandDescription, MarkdownText
from codehelp.word_resolver import IdentifierSpan, WordAtCursor, locate_identifier

logger = logging.getLogger(__name__)

RELOAD_COMMAND = "codehelp.reload"

Reporter = Callable[[str], None]


@dataclass(frozen=True)
class Hover:
    contents: MarkdownText
    span: IdentifierSpan


@dataclass(frozen=True)
class CompletionItem:
    label: str
    detail: str
    insert_text: str
    span: IdentifierSpan
    documentation: Optional[MarkdownText] = None
    kind: str = "snippet"


@dataclass
class ReloadResult:
    commands: List[str] = field(default_factory=list)
    errors: List[CodeHelpError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _log_reporter(message: str) -> None:
    logger.error(message)


class CodeHelpProvider:
    """Serves help for identifiers found in editor text.

    Args:
        config: Settings; defaults to ``CodeHelpConfig()``
        definitions: Pre-decoded sources used for the initial load instead
            of the configured source files
        reporter: Receives one message per failing source. Defaults to
            logging the message.
    """

    def __init__(
        self,
        config: Optional[CodeHelpConfig] = None,
        definitions: Optional[Sequence[DefinitionSource]] = None,
        reporter: Optional[Reporter] = None,
    ):
        self.config = config or CodeHelpConfig()
        self.reporter = reporter or _log_reporter
        self.registry = CommandRegistry()
        self.reload(definitions)

    @property
    def command_descriptions(self) -> Mapping[str, CommandDescription]:
        return self.registry.commands()

    def reload(self, definitions: Optional[Sequence[DefinitionSource]] = None) -> ReloadResult:
        """Re-read definitions and replace the registry contents.

        A failing source is reported and contributes nothing; the other
        sources are still loaded.
        """
        result = ReloadResult()
        if definitions is None:
            definitions = self._load_sources(result)

        descriptions: List[CommandDescription] = []
        for definition in definitions:
            try:
                descriptions.extend(parse_definitions(definition.tree, definition.source))
            except CodeHelpError as e:
                self._report(result, e)

        result.commands = self.registry.load(descriptions)
        logger.debug(
            "Reloaded %d commands with %d failing sources", len(result.commands), len(result.errors)
        )
        return result

    def _load_sources(self, result: ReloadResult) -> List[DefinitionSource]:
        loaded = []
        for path in self.config.sources:
            try:
                loaded.append(load_definition_source(path))
            except CodeHelpError as e:
                self._report(result, e)
        return loaded

    def _report(self, result: ReloadResult, error: CodeHelpError) -> None:
        logger.warning("Skipping definition source %s: %s", error.source, error.message)
        result.errors.append(error)
        self.reporter(str(error))

    def create_commands(self) -> Dict[str, Callable[[], ReloadResult]]:
        """Host commands exposed by this provider, keyed by command id."""
        return {RELOAD_COMMAND: lambda: self.reload()}

    def word_at(self, line_text: str, line: int, character: int) -> WordAtCursor:
        return locate_identifier(
            line_text, character, line=line, comment_marker=self.config.comment_marker
        )

    def provide_hover(self, line_text: str, line: int, character: int) -> Optional[Hover]:
        word = self.word_at(line_text, line, character)
        if not word.found:
            return None
        description = self.registry.get(word.identifier)
        if description is None:
            return None
        contents = description.format(self.config.hover_detail_level, True)
        if contents is None:
            return None
        return Hover(contents=contents, span=word.span)

    def provide_completion_items(
        self, line_text: str, line: int, character: int
    ) -> Optional[List[CompletionItem]]:
        """Suggest every command starting with the identifier at the cursor.

        Insertion text is the command followed by its editable parameters.
        """
        word = self.word_at(line_text, line, character)
        if not word.found:
            return None
        items = []
        for description in self.registry.prefix_search(word.identifier):
            insert_text = " ".join(
                [description.command] + [p.name for p in description.editable_parameters]
            )
            items.append(
                CompletionItem(
                    label=description.command,
                    detail=description.signature_text(),
                    insert_text=insert_text,
                    span=word.span,
                    documentation=description.format(self.config.completion_detail_level, False),
                )
            )
        return items
