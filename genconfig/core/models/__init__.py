"""
Domain models — Pydantic types for the config generator.

All models are re-exported here for convenient access:

    from genconfig.core.models import VariableEntry, TargetProfile, GeneratorSettings
"""

from genconfig.core.models.settings import GeneratorSettings
from genconfig.core.models.target import TargetProfile
from genconfig.core.models.variable import Attribute, VariableEntry

__all__ = [
    # variable.py
    "Attribute",
    # settings.py
    "GeneratorSettings",
    # target.py
    "TargetProfile",
    "VariableEntry",
]
