"""
Custom exception classes for codehelp.

This module defines structured exception types for definition loading,
descriptor parsing and configuration errors. Each error carries the label
of the source it came from so failures can be reported per source.
"""

from typing import Optional


class CodeHelpError(Exception):
    """Base exception for all codehelp errors."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{self.source}: {self.message}"


class DefinitionLoadError(CodeHelpError):
    """Error reading or decoding a definition source."""

    def _describe(self) -> str:
        return f"Error parsing command definitions from {self.source}: {self.message}"


class DefinitionParseError(CodeHelpError):
    """Structurally malformed descriptor in a decoded definition tree."""

    def __init__(self, source: str, message: str, command: Optional[str] = None):
        self.command = command
        super().__init__(source, message)

    def _describe(self) -> str:
        if self.command:
            return (
                f"Error loading command descriptions from {self.source} "
                f"at '{self.command}': {self.message}"
            )
        return f"Error loading command descriptions from {self.source}: {self.message}"


class ConfigError(CodeHelpError):
    """Invalid codehelp configuration."""

    def _describe(self) -> str:
        return f"Invalid configuration in {self.source}: {self.message}"
