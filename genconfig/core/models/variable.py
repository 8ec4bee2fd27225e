"""
Variable model — one parsed definition from the global config.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Attribute(str, Enum):
    """Modifiers allowed in the ``[...]`` group of a definition."""

    STRING = "string"
    EVAL = "eval"


class VariableEntry(BaseModel):
    """A single ``NAME[attrs]=VALUE`` definition.

    Attributes:
        name:        Identifier, unique within one parse.
        raw_value:   Text after the first ``=``, exactly as written.
        value:       Value after quote escaping and ``$NAME`` expansion.
        attributes:  Subset of {string, eval}.
        source_line: 1-based line number in the global config.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    raw_value: str = ""
    value: str = ""
    attributes: frozenset[Attribute] = Field(default_factory=frozenset)
    source_line: int = 0

    @property
    def is_string(self) -> bool:
        return Attribute.STRING in self.attributes
