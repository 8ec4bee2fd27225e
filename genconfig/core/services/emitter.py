"""
Emitter — VariableEntry → one line of target declaration syntax.

Also renders the provenance block placed in the AUTOGENERATE HEADER
region, using the target's comment leader.
"""

from __future__ import annotations

from collections.abc import Iterable

from genconfig.core.models.settings import DEFAULT_GLOBAL_CONFIG, DEFAULT_TEMPLATE_STEM
from genconfig.core.models.target import TargetProfile
from genconfig.core.models.variable import VariableEntry

HEADER_TAG = "AUTOGENERATE HEADER"
INCLUDE_TAG = "GLOBAL CONFIG INCLUDE"


def emit(entry: VariableEntry, profile: TargetProfile) -> str:
    """Declare one entry in the target's syntax."""
    return profile.declaration(entry.name, entry.value, quoted=entry.is_string)


def emit_all(entries: Iterable[VariableEntry], profile: TargetProfile) -> str:
    """Declare all entries, one per line, in parse order."""
    return "\n".join(emit(entry, profile) for entry in entries)


def render_header(
    profile: TargetProfile,
    command_line: str,
    timestamp: str,
    hostname: str,
    global_config: str = DEFAULT_GLOBAL_CONFIG,
    template_stem: str = DEFAULT_TEMPLATE_STEM,
) -> str:
    """Build the "generated, do not edit" comment block.

    Args:
        profile: Target whose comment leader prefixes every line.
        command_line: The command that produced the file.
        timestamp: Human-readable generation time.
        hostname: Host the generator ran on.
        global_config: Name of the global config file.
        template_stem: Template name without extension.

    Returns:
        Block text without a trailing newline.
    """
    body = [
        "",
        "This configuration file was automatically generated",
        f"with command '{command_line}'",
        f"on {timestamp} on host '{hostname}'.",
        "",
        "Do not edit this file by hand! Instead, edit parts of this",
        f"file which are outside the '{HEADER_TAG}' and",
        f"'{INCLUDE_TAG}' tags in the templates '{template_stem}.*'.",
        "",
        f"Configuration options inside '{INCLUDE_TAG}' tags",
        f"should be edited in the main configuration file '{global_config}'",
        "and then be included here by running genconfig again.",
        "",
    ]
    leader = profile.comment_leader
    return "\n".join(f"{leader} {line}" if line else leader for line in body)
