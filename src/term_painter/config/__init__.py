"""Configuration module for term-painter.

Main exports:
    PainterConfig: Configuration model
    load_config: Resolve defaults, YAML file and environment overrides
    write_default_config: Write a default config.yaml

Usage:
    from term_painter.config import load_config

    config = load_config()
    if not config.enabled:
        ...
"""

from term_painter.config.loader import load_config, write_default_config
from term_painter.config.models import PainterConfig, get_config_dir, get_default_config

__all__ = [
    # Models
    "PainterConfig",
    # Loader functions
    "load_config",
    "write_default_config",
    # Model helpers
    "get_config_dir",
    "get_default_config",
]
