"""
Error taxonomy for a generation run.

Every failure a run can hit derives from ``GenerationError`` so the CLI
can report it and exit 1 without catching anything else.  Each error
carries the context needed to find the offending input: a line number,
a tag name or a file path.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for all fatal generation failures."""


class UsageError(GenerationError):
    """Missing or invalid command-line argument."""


class UnsupportedTargetError(GenerationError):
    """The requested target (id or file extension) has no profile."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Filetype '{target}' is not supported.")


class MissingInputError(GenerationError):
    """The template or the global config cannot be read."""

    def __init__(
        self, path: Path, what: str, problem: str = "does not exist or is not readable"
    ) -> None:
        self.path = path
        self.what = what
        super().__init__(f"{what} '{path}' {problem}.")


class ParseError(GenerationError):
    """A line of the global config is malformed.

    ``source`` is filled in by the caller that knows which file was parsed.
    """

    def __init__(self, line: int, reason: str, source: Path | None = None) -> None:
        self.line = line
        self.reason = reason
        self.source = source
        super().__init__(line, reason)

    def __str__(self) -> str:
        return f"{self.reason} {self._location()}"

    def _location(self) -> str:
        if self.source is None:
            return f"on line {self.line}"
        return f"on line {self.line} of {self.source}"


class DuplicateVariableError(ParseError):
    """A variable name is defined twice, or is reserved."""

    def __init__(self, name: str, line: int) -> None:
        self.name = name
        super().__init__(line, "variable already in use")

    def __str__(self) -> str:
        return f"Variable '{self.name}' already in use {self._location()}"


class TagStructureError(GenerationError):
    """START/END tags of a template region are missing, repeated or misplaced."""

    def __init__(self, tag: str, reason: str) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f"'{tag}': {reason}")


class ConfigError(GenerationError):
    """Raised when genconfig.yml is invalid or unreadable."""
