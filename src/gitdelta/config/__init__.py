"""Configuration loading, schema, and defaults."""

from gitdelta.config.loader import ConfigError, load_config
from gitdelta.config.schema import DeltaConfig, SectionStyle

__all__ = [
    "ConfigError",
    "DeltaConfig",
    "SectionStyle",
    "load_config",
]
