"""
Generator settings — optional overrides loaded from genconfig.yml.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_GLOBAL_CONFIG = "global.cfg"
DEFAULT_TEMPLATE_STEM = "config.template"


class GeneratorSettings(BaseModel):
    """Where the inputs live and which names are off limits.

    Attributes:
        global_config:       Global config file name, relative to the base dir.
        template_stem:       Templates are named ``<template_stem>.<ext>``.
        reserved_names:      Names the global config may not define.
        reserve_environment: Also reserve every process environment name.
    """

    global_config: str = DEFAULT_GLOBAL_CONFIG
    template_stem: str = DEFAULT_TEMPLATE_STEM
    reserved_names: list[str] = Field(default_factory=list)
    reserve_environment: bool = False
