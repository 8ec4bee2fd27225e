"""
Target profiles — the closed table of supported output languages.

Adding a language means adding one TargetProfile here; the parser and
splicer never look at it.
"""

from __future__ import annotations

from genconfig.core.errors import UnsupportedTargetError
from genconfig.core.models.target import TargetProfile

HEADER = TargetProfile(
    id="header",
    extension="h",
    comment_leader="//",
    declare_string='#define {name} "{value}"',
    declare_raw="#define {name} {value}",
)

SHELL_SCRIPT = TargetProfile(
    id="shell-script",
    extension="sh",
    comment_leader="#",
    declare_string='{name}="{value}"',
    declare_raw="{name}={value}",
)

PHP = TargetProfile(
    id="php",
    extension="php",
    comment_leader="//",
    declare_string="define('{name}', '{value}');",
    declare_raw="define('{name}', {value});",
)

# TeX has no unquoted form
MACRO = TargetProfile(
    id="macro",
    extension="tex",
    comment_leader="%",
    declare_string="\\def\\{name}{{{value}}}",
    declare_raw="\\def\\{name}{{{value}}}",
)

TARGET_PROFILES: tuple[TargetProfile, ...] = (HEADER, SHELL_SCRIPT, PHP, MACRO)

_BY_ID: dict[str, TargetProfile] = {p.id: p for p in TARGET_PROFILES}
_BY_EXTENSION: dict[str, TargetProfile] = {p.extension: p for p in TARGET_PROFILES}


def resolve_target(target: str) -> TargetProfile:
    """Look up a profile by target id or file extension.

    Raises:
        UnsupportedTargetError: If neither table knows ``target``.
    """
    profile = _BY_EXTENSION.get(target) or _BY_ID.get(target)
    if profile is None:
        raise UnsupportedTargetError(target)
    return profile


def supported_extensions() -> list[str]:
    """File extensions accepted on the command line."""
    return [p.extension for p in TARGET_PROFILES]
