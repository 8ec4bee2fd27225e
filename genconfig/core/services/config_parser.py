"""
Global config parser — ``NAME[attrs]=VALUE`` lines into VariableEntry models.

One pass, top to bottom.  Each accepted entry is appended to a symbol
table so later ``eval`` entries can refer to it with ``$NAME``; later
definitions are not visible to earlier ones.

Line syntax::

    # comment
    NAME=VALUE
    NAME[string]=VALUE
    NAME[string,eval]=prefix-$OTHER
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from genconfig.core.errors import DuplicateVariableError, ParseError
from genconfig.core.models.variable import Attribute, VariableEntry

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_ATTR_GROUP_RE = re.compile(r"^[a-z]+(,[a-z]+)*\]$")
_SKIP_RE = re.compile(r"^(\s*$|#)")
_REFERENCE_RE = re.compile(r"\$([A-Za-z][A-Za-z0-9_]*)")
_QUOTE_RE = re.compile(r"(['\"])")


def parse(text: str, reserved: Iterable[str] = ()) -> list[VariableEntry]:
    """Parse global config text into entries, in file order.

    Args:
        text: Full content of the global config.
        reserved: Names already taken by the surrounding environment.

    Returns:
        One VariableEntry per definition line.

    Raises:
        ParseError: On the first malformed line.
        DuplicateVariableError: When a name is redefined or reserved.
    """
    reserved_names = frozenset(reserved)
    symbols: dict[str, str] = {}
    entries: list[VariableEntry] = []

    for lineno, line in enumerate(_lines(text), start=1):
        if _SKIP_RE.match(line):
            continue

        entry = _parse_line(line, lineno, symbols)

        if entry.name in symbols or entry.name in reserved_names:
            raise DuplicateVariableError(entry.name, lineno)

        symbols[entry.name] = entry.value
        entries.append(entry)
        logger.debug("line %d: %s = %r", lineno, entry.name, entry.value)

    logger.debug("Parsed %d variables", len(entries))
    return entries


def _lines(text: str) -> list[str]:
    """Split on ``\\n`` only; other Unicode line breaks belong to the value."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_line(line: str, lineno: int, symbols: dict[str, str]) -> VariableEntry:
    definition, _, raw_value = line.partition("=")

    attributes = _parse_attributes(definition, lineno)
    name = definition.split("[", 1)[0]
    if not _NAME_RE.match(name):
        raise ParseError(lineno, f"invalid variable name '{name}'")

    value = escape_quotes(raw_value)
    if Attribute.EVAL in attributes:
        value = expand_references(value, symbols, lineno)

    return VariableEntry(
        name=name,
        raw_value=raw_value,
        value=value,
        attributes=attributes,
        source_line=lineno,
    )


def _parse_attributes(definition: str, lineno: int) -> frozenset[Attribute]:
    """Extract the trailing ``[a,b]`` group of a definition, if any."""
    if "[" not in definition:
        return frozenset()

    group = definition.split("[", 1)[1]
    if not _ATTR_GROUP_RE.match(group):
        raise ParseError(lineno, "parse error")

    attributes: set[Attribute] = set()
    for token in group[:-1].split(","):
        try:
            attributes.add(Attribute(token))
        except ValueError:
            raise ParseError(lineno, f"unknown attribute '{token}'") from None
    return frozenset(attributes)


def escape_quotes(value: str) -> str:
    """Backslash-escape every ``'`` and ``"`` in a value."""
    return _QUOTE_RE.sub(r"\\\1", value)


def expand_references(value: str, symbols: dict[str, str], lineno: int = 0) -> str:
    """Replace ``$NAME`` with the stored value of an earlier entry.

    Unknown names expand to an empty string.
    """

    def _lookup(match: re.Match[str]) -> str:
        ref = match.group(1)
        if ref not in symbols:
            logger.warning(
                "Unresolved reference '$%s' on line %d expands to empty text", ref, lineno
            )
            return ""
        return symbols[ref]

    return _REFERENCE_RE.sub(_lookup, value)
