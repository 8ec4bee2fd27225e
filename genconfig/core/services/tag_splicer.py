"""
Tag splicer — replace the interior of a ``<TAG> START`` / ``<TAG> END`` region.

A region is delimited by exactly one line containing ``"<TAG> START"``
and exactly one later line containing ``"<TAG> END"``.  Everything up to
and including the START line and everything from the END line on is
copied byte for byte; only the lines between them are replaced.
"""

from __future__ import annotations

import logging
import re

from genconfig.core.errors import TagStructureError

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"(?<=\n)")


def find_region(lines: list[str], tag: str, max_window: int | None = None) -> tuple[int, int]:
    """Locate the START and END line indices of a tag region.

    Args:
        lines: Document lines.
        tag: Region name, e.g. ``"GLOBAL CONFIG INCLUDE"``.
        max_window: Optional limit on how many lines END may follow START.

    Returns:
        ``(start_index, end_index)``.

    Raises:
        TagStructureError: Tags are missing, repeated or out of order.
    """
    start_marker = f"{tag} START"
    end_marker = f"{tag} END"

    starts = [i for i, line in enumerate(lines) if start_marker in line]
    ends = [i for i, line in enumerate(lines) if end_marker in line]

    if len(starts) != 1 or len(ends) != 1:
        raise TagStructureError(
            tag,
            f"incorrect number of START and/or END tags "
            f"(found {len(starts)} START, {len(ends)} END)",
        )

    start, end = starts[0], ends[0]
    if end <= start:
        raise TagStructureError(tag, "END tag does not close START tag")
    if max_window is not None and end - start > max_window:
        raise TagStructureError(
            tag, f"END tag is more than {max_window} lines after START tag"
        )

    logger.debug("'%s' region: lines %d-%d", tag, start + 1, end + 1)
    return start, end


def splice(
    document: str,
    tag: str,
    replacement: str,
    max_window: int | None = None,
) -> str:
    """Return ``document`` with the interior of region ``tag`` replaced.

    Args:
        document: Template or previously generated text.
        tag: Region name.
        replacement: New interior; its lines take the START line's ending.
        max_window: Optional limit passed to :func:`find_region`.

    Raises:
        TagStructureError: If the region is malformed.
    """
    lines = _lines(document)
    start, end = find_region(lines, tag, max_window)

    # START always ends in a line break since END follows it
    head = lines[: start + 1]
    tail = lines[end:]
    eol = "\r\n" if head[-1].endswith("\r\n") else "\n"

    interior = ""
    if replacement:
        body = replacement.removesuffix("\n").split("\n")
        interior = "".join(line.removesuffix("\r") + eol for line in body)
    return "".join(head) + interior + "".join(tail)


def _lines(document: str) -> list[str]:
    """Split after each ``\\n`` only, keeping line endings."""
    return [line for line in _LINE_RE.split(document) if line]
