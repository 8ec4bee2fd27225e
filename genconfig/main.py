"""
genconfig — CLI entrypoint.

Usage:
    python -m genconfig.main <filename> | <extension>
    genconfig sh
    genconfig path/to/config.h

Generates ``config.<ext>`` from ``config.template.<ext>`` and
``global.cfg`` in the current directory.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from genconfig.core.observability.logging_config import setup_logging
from genconfig.core.services.targets import supported_extensions

HELP = f"""Generate a language-specific config file from the global config.

TARGET is a file extension ({', '.join(supported_extensions())}) or a file name ending in one.
"""


@click.command(help=HELP)
@click.argument("target", required=False, default="")
@click.pass_context
def cli(ctx: click.Context, target: str) -> None:
    setup_logging()

    from genconfig.core.config.loader import load_settings
    from genconfig.core.errors import GenerationError
    from genconfig.core.use_cases.generate import regenerate

    base_dir = Path.cwd()
    command_line = f"{ctx.command_path} {target}".strip()

    try:
        settings = load_settings(base_dir)
        result = regenerate(target, base_dir, settings, command_line=command_line)
    except GenerationError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    click.secho(
        f"✅ {result.output_path.name} generated from {result.template_path.name} "
        f"({result.variable_count} variables)",
        fg="green",
    )


if __name__ == "__main__":
    cli()
