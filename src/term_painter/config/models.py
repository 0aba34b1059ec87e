"""Pydantic models for term-painter configuration.

Classes:
    PainterConfig: Top-level configuration (styling switches + logging)
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from term_painter.observability.logging import LoggingConfig

ColorSystemName = Literal["auto", "standard", "256", "truecolor"]


class PainterConfig(BaseModel, frozen=True):
    """Top-level term-painter configuration.

    Attributes:
        enabled: Master switch. When False no terminal is acquired and all
            output is plain.
        force_terminal: Treat stdout as a terminal (True) or as a pipe
            (False) regardless of detection. None means detect.
        color_system: Palette to assume; "auto" asks rich to detect it.
        logging: Logging configuration.
    """

    enabled: bool = True
    force_terminal: bool | None = None
    color_system: ColorSystemName = "auto"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the term-painter configuration directory path.

    Returns:
        Path to ~/.config/term-painter/
    """
    return Path.home() / ".config" / "term-painter"


def get_default_config() -> PainterConfig:
    """Get the default configuration."""
    return PainterConfig()
