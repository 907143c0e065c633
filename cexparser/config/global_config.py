"""
Configuration loader (TOML).

Stores parser markers, reserved labels and loader settings.
Uses Pydantic for validation.
"""

from pathlib import Path
import tomllib

from .models import CexConfig

DEFAULT_CONFIG_PATH = Path("config/defaults.toml")


def load_config(config_path: Path) -> CexConfig:
    """
    Loads and validates the configuration from a TOML file.

    Args:
        config_path: Path to the configuration file (usually defaults.toml).

    Returns:
        A validated CexConfig object.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If a value has the wrong type or is out of range.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    return CexConfig(**data)


def load_config_or_default(config_path: Path | None = None) -> CexConfig:
    """
    Loads the configuration if the file exists, otherwise returns built-in defaults.

    Args:
        config_path: Optional path; DEFAULT_CONFIG_PATH when omitted.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return CexConfig()
    return load_config(path)
