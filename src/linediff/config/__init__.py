"""Configuration loading, schema, and defaults."""

from linediff.config.loader import ConfigError, load_config
from linediff.config.schema import DiffConfig, LineDiffConfig, OutputConfig

__all__ = [
    "ConfigError",
    "DiffConfig",
    "LineDiffConfig",
    "OutputConfig",
    "load_config",
]
