"""Configuration models and loaders for filehasher."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import FileHasherConfig, HashingConfig, RuntimeConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "FileHasherConfig",
    "HashingConfig",
    "RuntimeConfig",
    "dump_example_config",
    "load_config",
]
