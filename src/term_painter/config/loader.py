"""Configuration loading for term-painter.

Configuration is optional. Values are resolved in this order, later sources
winning:

1. Built-in defaults (PainterConfig)
2. YAML file: the given path, or ~/.config/term-painter/config.yaml if it
   exists
3. Environment variables:
   - NO_COLOR (non-empty disables styling, see https://no-color.org)
   - TERM_PAINTER_ENABLED
   - TERM_PAINTER_FORCE_TERMINAL
   - TERM_PAINTER_COLOR_SYSTEM
   - TERM_PAINTER_LOG_MODE
   - TERM_PAINTER_LOG_LEVEL

Functions:
    load_config: Load and validate the effective configuration
    write_default_config: Write a default config.yaml
"""

from collections.abc import Mapping
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError
import yaml

from term_painter.config.models import PainterConfig, get_config_dir, get_default_config
from term_painter.core.errors import ConfigError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(key: str, raw: str) -> bool:
    """Parse a boolean environment value.

    Raises:
        ConfigError: If the value is not a recognised boolean.
    """
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid boolean for {key}: {raw!r}",
        config_key=key,
    )


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """Read a YAML mapping from ``config_path``.

    Raises:
        ConfigError: If the file is malformed or not a mapping.
    """
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse configuration file: {e}",
            config_file=str(config_path),
            details={"yaml_error": str(e)},
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            "Configuration file must contain a mapping",
            config_file=str(config_path),
        )
    return data


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    """Collect configuration values set through environment variables."""
    overrides: dict[str, Any] = {}
    logging_overrides: dict[str, Any] = {}

    if raw := environ.get("TERM_PAINTER_ENABLED"):
        overrides["enabled"] = _parse_bool("TERM_PAINTER_ENABLED", raw)
    # NO_COLOR wins over everything else when set
    if environ.get("NO_COLOR"):
        overrides["enabled"] = False
    if raw := environ.get("TERM_PAINTER_FORCE_TERMINAL"):
        overrides["force_terminal"] = _parse_bool("TERM_PAINTER_FORCE_TERMINAL", raw)
    if raw := environ.get("TERM_PAINTER_COLOR_SYSTEM"):
        overrides["color_system"] = raw.strip().lower()
    if raw := environ.get("TERM_PAINTER_LOG_MODE"):
        logging_overrides["mode"] = raw.strip().lower()
    if raw := environ.get("TERM_PAINTER_LOG_LEVEL"):
        logging_overrides["log_level"] = raw.strip().upper()

    if logging_overrides:
        overrides["logging"] = logging_overrides
    return overrides


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PainterConfig:
    """Load the effective configuration.

    Args:
        config_path: YAML file to read. An explicit path must exist; the
            default path (~/.config/term-painter/config.yaml) is optional.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Validated PainterConfig instance.

    Raises:
        ConfigError: If the file is missing (explicit path only), malformed,
            or any value fails validation.
    """
    if environ is None:
        environ = os.environ

    data: dict[str, Any] = {}
    source: Path | None = None
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                config_file=str(config_path),
            )
        source = config_path
    elif (default_path := get_config_dir() / "config.yaml").exists():
        source = default_path

    if source is not None:
        data = _read_yaml(source)

    overrides = _env_overrides(environ)
    if "logging" in overrides:
        file_logging = data.get("logging") or {}
        overrides["logging"] = {**file_logging, **overrides["logging"]}
    data = {**data, **overrides}

    try:
        return PainterConfig.model_validate(data)
    except PydanticValidationError as e:
        # Format validation errors for clarity
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            error_messages.append(f"  - {loc}: {msg}")

        raise ConfigError(
            "Configuration validation failed:\n" + "\n".join(error_messages),
            config_file=str(source) if source else None,
            details={"validation_errors": e.errors()},
        ) from e


def write_default_config(config_path: Path | None = None, *, overwrite: bool = False) -> Path:
    """Write the default configuration as YAML.

    Args:
        config_path: Target file. Defaults to ~/.config/term-painter/config.yaml.
        overwrite: Replace an existing file.

    Returns:
        The path written.

    Raises:
        ConfigError: If the file exists and overwrite is False.
    """
    if config_path is None:
        config_path = get_config_dir() / "config.yaml"

    if config_path.exists() and not overwrite:
        raise ConfigError(
            f"Configuration file already exists: {config_path}",
            config_file=str(config_path),
        )

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w") as f:
        yaml.dump(
            get_default_config().model_dump(mode="json"),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    return config_path
