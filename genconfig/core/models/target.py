"""
Target profile model — declaration syntax for one output language.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TargetProfile(BaseModel):
    """Syntax rules for one generated config language.

    The declaration templates are ``str.format`` patterns receiving
    ``name`` and ``value``.

    Attributes:
        id:             Target identifier (header, shell-script, php, macro).
        extension:      File suffix selecting this target (h, sh, php, tex).
        comment_leader: Prefix of a line comment in the target language.
        declare_string: Pattern for entries with the ``string`` attribute.
        declare_raw:    Pattern for all other entries.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    extension: str
    comment_leader: str
    declare_string: str
    declare_raw: str

    def declaration(self, name: str, value: str, quoted: bool) -> str:
        pattern = self.declare_string if quoted else self.declare_raw
        return pattern.format(name=name, value=value)
