"""codehelp package root.

Normalizes YAML command documentation into ``CommandDescription`` models,
renders them at a requested detail level and resolves the identifier under
a cursor so hover and completion requests can find the right description.
"""

__version__ = "0.1.0"

from codehelp.config import CodeHelpConfig, load_config  # noqa: F401
from codehelp.definition_loader import DefinitionSource, load_definition_source  # noqa: F401
from codehelp.exceptions import (  # noqa: F401
    CodeHelpError,
    ConfigError,
    DefinitionLoadError,
    DefinitionParseError,
)
from codehelp.parser import parse_definitions  # noqa: F401
from codehelp.provider import CodeHelpProvider, CompletionItem, Hover, ReloadResult  # noqa: F401
from codehelp.registry import CommandRegistry  # noqa: F401
from codehelp.schemas import *  # noqa: F401,F403
from codehelp.schemas import __all__ as SCHEMA_EXPORTS
from codehelp.word_resolver import IdentifierSpan, WordAtCursor, locate_identifier  # noqa: F401

__all__ = [
    "__version__",
    "CodeHelpConfig",
    "load_config",
    "DefinitionSource",
    "load_definition_source",
    "CodeHelpError",
    "ConfigError",
    "DefinitionLoadError",
    "DefinitionParseError",
    "parse_definitions",
    "CodeHelpProvider",
    "CompletionItem",
    "Hover",
    "ReloadResult",
    "CommandRegistry",
    "IdentifierSpan",
    "WordAtCursor",
    "locate_identifier",
] + SCHEMA_EXPORTS
