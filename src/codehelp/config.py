"""Configuration for codehelp."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

from codehelp.exceptions import ConfigError
from codehelp.schemas import DetailLevel
from codehelp.word_resolver import DEFAULT_COMMENT_MARKER

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_SOURCES: Tuple[Path, ...] = (DATA_DIR / "synth.yaml",)


@dataclass(frozen=True)
class CodeHelpConfig:
    sources: Tuple[Path, ...] = field(default=DEFAULT_SOURCES)
    hover_detail_level: DetailLevel = DetailLevel.FULL
    completion_detail_level: DetailLevel = DetailLevel.NO_EXAMPLES_NO_LINKS
    comment_marker: str = DEFAULT_COMMENT_MARKER


def load_config(path: Optional[Union[str, Path]] = None) -> CodeHelpConfig:
    """Load codehelp settings from a YAML file.

    Recognized keys: ``sources`` (list of paths, relative to the config
    file), ``hover_detail_level``, ``completion_detail_level`` and
    ``comment_marker``. A missing or empty file yields the defaults.

    Raises:
        ConfigError: If the file is unreadable, not valid YAML or a value is invalid
    """
    if path is None:
        return CodeHelpConfig()
    path = Path(path)
    if not path.exists():
        return CodeHelpConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(str(path), str(e))
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"Invalid YAML: {e}")
    if data is None:
        return CodeHelpConfig()
    if not isinstance(data, dict):
        raise ConfigError(str(path), "Top level must be a mapping")

    values = {}
    if "sources" in data:
        sources = data["sources"]
        if isinstance(sources, str):
            sources = [sources]
        if not isinstance(sources, list) or not all(isinstance(s, str) for s in sources):
            raise ConfigError(str(path), "sources must be a list of paths")
        values["sources"] = tuple(path.parent / s for s in sources)

    for key in ("hover_detail_level", "completion_detail_level"):
        if key in data:
            try:
                values[key] = DetailLevel.parse(data[key])
            except ValueError as e:
                raise ConfigError(str(path), f"{key}: {e}")

    if "comment_marker" in data:
        marker = data["comment_marker"]
        if not isinstance(marker, str):
            raise ConfigError(str(path), "comment_marker must be a string")
        values["comment_marker"] = marker

    return CodeHelpConfig(**values)
