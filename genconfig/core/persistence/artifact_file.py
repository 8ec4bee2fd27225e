"""
Artifact persistence — atomic commit of a generated config file.

The artifact is written to a temp file in the target directory and then
renamed over the destination, so readers only ever see the previous
file or the complete new one.  A failed write leaves the previous
artifact untouched.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_artifact(content: str, path: Path, mode_from: Path | None = None) -> None:
    """Write ``content`` to ``path`` atomically.

    Args:
        content: Full file content.
        path: Destination artifact path.
        mode_from: Optional file whose permission bits the artifact copies
            (the template it was generated from).
    """
    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".new",
    )
    os.close(fd)
    tmp = Path(tmp_path)
    try:
        tmp.write_text(content, encoding="utf-8", newline="")
        if mode_from is not None:
            shutil.copymode(mode_from, tmp)
        tmp.replace(path)
    except Exception as e:
        tmp.unlink(missing_ok=True)
        logger.error("Failed to write %s: %s", path, e)
        raise

    logger.debug("Artifact committed to %s", path)
