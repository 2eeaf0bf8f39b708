"""Definition source loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml

from codehelp.exceptions import DefinitionLoadError


@dataclass(frozen=True)
class DefinitionSource:
    """A decoded definition tree plus the label used in error messages."""

    source: str
    tree: Any


def decode_definitions(text: str, source: str) -> DefinitionSource:
    """Decode YAML (or JSON) text into a definition tree.

    Raises:
        DefinitionLoadError: If the text is not valid YAML
    """
    try:
        tree = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DefinitionLoadError(source, f"Invalid YAML: {e}")
    return DefinitionSource(source=source, tree=tree)


def load_definition_source(path: Union[str, Path]) -> DefinitionSource:
    """Read and decode one definition file.

    Raises:
        DefinitionLoadError: If the file is missing, unreadable or not YAML
    """
    path = Path(path)
    source = str(path)
    if not path.exists():
        raise DefinitionLoadError(source, "File not found")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DefinitionLoadError(source, str(e))
    return decode_definitions(text, source)
