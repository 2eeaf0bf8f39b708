"""Live command registry with reload-and-prune semantics."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from codehelp.schemas import CommandDescription

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Map command names to their descriptions.

    ``load`` replaces the whole mapping: commands in the new batch are added
    or overwritten and every other command is pruned. The new mapping is
    built off to the side and swapped in, so readers see either the old or
    the new contents, never a mix.
    """

    def __init__(self, descriptions: Optional[Iterable[CommandDescription]] = None):
        self._lock = threading.Lock()
        self._commands: Mapping[str, CommandDescription] = MappingProxyType({})
        if descriptions is not None:
            self.load(descriptions)

    def load(self, descriptions: Iterable[CommandDescription]) -> List[str]:
        """Replace the registry contents.

        Duplicate command names keep the last description.

        Returns:
            Command names now registered, in registry order
        """
        commands: Dict[str, CommandDescription] = {}
        for description in descriptions:
            commands[description.command] = description

        with self._lock:
            previous = self._commands
            self._commands = MappingProxyType(commands)

        pruned = [name for name in previous if name not in commands]
        logger.debug(
            "Registry loaded %d commands (%d pruned)", len(commands), len(pruned)
        )
        return list(commands)

    def get(self, name: str) -> Optional[CommandDescription]:
        return self._commands.get(name)

    def prefix_search(self, prefix: str) -> List[CommandDescription]:
        """Descriptions whose command starts with ``prefix`` (case-sensitive)."""
        commands = self._commands
        return [desc for name, desc in commands.items() if name.startswith(prefix)]

    def commands(self) -> Mapping[str, CommandDescription]:
        """Read-only snapshot of the current contents."""
        return self._commands

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)
