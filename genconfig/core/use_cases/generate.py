"""
Generate use case — build one target's config file from its template.

``generate()`` is the pure pipeline (texts in, artifact text out).
``regenerate()`` wraps it with the file conventions: it finds the
template and global config in a base directory, and commits the
result next to the template only if every step succeeded.
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from genconfig.core.config.loader import reserved_names
from genconfig.core.errors import (
    ConfigError,
    MissingInputError,
    ParseError,
    TagStructureError,
    UsageError,
)
from genconfig.core.models.settings import (
    DEFAULT_GLOBAL_CONFIG,
    DEFAULT_TEMPLATE_STEM,
    GeneratorSettings,
)
from genconfig.core.models.target import TargetProfile
from genconfig.core.models.variable import VariableEntry
from genconfig.core.persistence.artifact_file import write_artifact
from genconfig.core.services import config_parser
from genconfig.core.services.emitter import HEADER_TAG, INCLUDE_TAG, emit_all, render_header
from genconfig.core.services.tag_splicer import splice
from genconfig.core.services.targets import resolve_target, supported_extensions

logger = logging.getLogger(__name__)

TEMPLATE_INFIX = "template."

# Same layout as date(1)
_TIMESTAMP_FMT = "%a %b %d %H:%M:%S %Z %Y"


@dataclass
class GenerationResult:
    """Outcome of a committed generation run."""

    target: str
    template_path: Path
    output_path: Path
    variable_count: int = 0

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "template_path": str(self.template_path),
            "output_path": str(self.output_path),
            "variable_count": self.variable_count,
        }


def generate(
    target: str,
    global_config_text: str,
    template_text: str,
    *,
    reserved: Iterable[str] = (),
    command_line: str = "genconfig",
    timestamp: str | None = None,
    hostname: str | None = None,
    global_config: str = DEFAULT_GLOBAL_CONFIG,
    template_stem: str = DEFAULT_TEMPLATE_STEM,
) -> str:
    """Produce the artifact text for one target.

    Args:
        target: Target id or file extension.
        global_config_text: Content of the global config.
        template_text: Content of the target's template.
        reserved: Names the global config may not define.
        command_line: Recorded in the provenance header.
        timestamp: Recorded in the header (default: now, local time).
        hostname: Recorded in the header (default: this host).
        global_config: Global config name shown in the header.
        template_stem: Template name pattern shown in the header.

    Raises:
        UnsupportedTargetError, ParseError, TagStructureError.
    """
    profile = resolve_target(target)
    entries = config_parser.parse(global_config_text, reserved)
    return _assemble(
        profile,
        entries,
        template_text,
        command_line=command_line,
        timestamp=timestamp,
        hostname=hostname,
        global_config=global_config,
        template_stem=template_stem,
    )


def _assemble(
    profile: TargetProfile,
    entries: Sequence[VariableEntry],
    template_text: str,
    *,
    command_line: str,
    timestamp: str | None,
    hostname: str | None,
    global_config: str,
    template_stem: str,
) -> str:
    """Splice the header and the declarations into the template."""
    header = render_header(
        profile,
        command_line=command_line,
        timestamp=timestamp or datetime.now().astimezone().strftime(_TIMESTAMP_FMT),
        hostname=hostname or socket.gethostname(),
        global_config=global_config,
        template_stem=template_stem,
    )
    body = emit_all(entries, profile)

    doc = splice(template_text, HEADER_TAG, header)
    doc = splice(doc, INCLUDE_TAG, body)

    logger.debug("Generated %s config with %d variables", profile.id, len(entries))
    return doc


def output_path_for(template_path: Path) -> Path:
    """``config.template.sh`` → ``config.sh``."""
    return template_path.with_name(template_path.name.replace(TEMPLATE_INFIX, "", 1))


def regenerate(
    argument: str,
    base_dir: Path,
    settings: GeneratorSettings | None = None,
    command_line: str = "genconfig",
) -> GenerationResult:
    """Regenerate ``config.<ext>`` from ``config.template.<ext>`` and the global config.

    Args:
        argument: A file extension, or any file name whose last suffix is one.
        base_dir: Directory holding the template and the global config.
        settings: File name overrides and reserved names.
        command_line: Recorded in the provenance header.

    Returns:
        GenerationResult describing the committed artifact.

    Raises:
        GenerationError: Any failure; the existing artifact is left untouched.
    """
    settings = settings or GeneratorSettings()

    if not argument:
        raise UsageError(
            "Usage: genconfig <filename> | <extension> "
            f"(one of: {', '.join(supported_extensions())})"
        )

    extension = argument.rsplit(".", 1)[-1]
    profile = resolve_target(extension)

    template_path = base_dir / f"{settings.template_stem}.{profile.extension}"
    config_path = base_dir / settings.global_config
    output_path = output_path_for(template_path)
    if output_path == template_path:
        raise ConfigError(
            f"Template name '{template_path.name}' has no '{TEMPLATE_INFIX}' part "
            "to strip for the output file."
        )

    template_text = _read_input(template_path, "Template")
    global_config_text = _read_input(config_path, "Global config")

    entries = _parse_global_config(global_config_text, config_path, reserved_names(settings))
    try:
        document = _assemble(
            profile,
            entries,
            template_text,
            command_line=command_line,
            timestamp=None,
            hostname=None,
            global_config=settings.global_config,
            template_stem=settings.template_stem,
        )
    except TagStructureError as e:
        raise TagStructureError(e.tag, f"{e.reason} in {template_path}") from e

    write_artifact(document, output_path, mode_from=template_path)
    logger.info("Wrote %s from %s (%d variables)", output_path, template_path, len(entries))

    return GenerationResult(
        target=profile.id,
        template_path=template_path,
        output_path=output_path,
        variable_count=len(entries),
    )


def _parse_global_config(
    text: str, config_path: Path, reserved: Iterable[str]
) -> list[VariableEntry]:
    try:
        return config_parser.parse(text, reserved)
    except ParseError as e:
        e.source = config_path
        raise


def _read_input(path: Path, what: str) -> str:
    """Read an input file as UTF-8, keeping its line endings."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise MissingInputError(path, what) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MissingInputError(
            path, what, f"is not valid UTF-8 (byte 0x{data[e.start]:02x} at offset {e.start})"
        ) from e
