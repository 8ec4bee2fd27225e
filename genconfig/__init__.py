"""
genconfig — project one global config file into per-language config files.
"""

__version__ = "0.1.0"
