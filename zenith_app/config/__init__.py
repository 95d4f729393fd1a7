"""
Configuration module.

Frozen dataclass defaults, YAML file overrides and per-call overrides merged
with explicit precedence, validated before use.
"""

from .defaults import DefaultConfig, SequenceParams, get_default_config
from .loader import ConfigLoader

__all__ = ["ConfigLoader", "DefaultConfig", "SequenceParams", "get_default_config"]
