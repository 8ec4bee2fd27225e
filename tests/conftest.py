"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from genconfig.core.observability.logging_config import PACKAGE_LOGGER

SHELL_TEMPLATE = textwrap.dedent("""\
    #!/bin/sh
    # Shell config for the system.

    # AUTOGENERATE HEADER START
    # (old header)
    # AUTOGENERATE HEADER END

    # GLOBAL CONFIG INCLUDE START
    OLD_VALUE=stale
    # GLOBAL CONFIG INCLUDE END

    LOCAL_ONLY=1
""")

GLOBAL_CFG = textwrap.dedent("""\
    # Global configuration
    FOO=bar

    BAZ[string]=he said "hi"
""")


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """A directory holding global.cfg and config.template.sh."""
    (tmp_path / "global.cfg").write_text(GLOBAL_CFG)
    (tmp_path / "config.template.sh").write_text(SHELL_TEMPLATE)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers a CLI run attached, so they never outlive the test's streams."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
