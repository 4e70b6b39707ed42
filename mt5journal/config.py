"""Configuration loading for MT5 Journal.

Settings live in ``~/.config/mt5journal/config.toml``. Missing keys fall
back to ``DEFAULT_CONFIG``.
"""

import copy
from pathlib import Path
from typing import Optional

import toml

from mt5journal.errors import ConfigError


def get_config_dir() -> Path:
    """Directory holding the config file and the default database."""
    return Path.home() / ".config" / "mt5journal"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


DEFAULT_CONFIG = {
    "journal": {
        "db_path": "",  # empty means <config dir>/journal.db
        "export_dir": ".",
    },
    "logging": {
        "level": "WARNING",
    },
    "analysis": {
        "min_trades": 5,
        "top": 3,
    },
}


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration, falling back to defaults.

    Args:
        config_path: Config file to read. Defaults to the user config file.

    Returns:
        Config dict with every default key present.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        user_config = toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    return _merge(DEFAULT_CONFIG, user_config)


def get_db_path(config: dict) -> Path:
    """Database path from config, defaulting to the config directory."""
    db_path = config.get("journal", {}).get("db_path")
    if db_path:
        return Path(db_path).expanduser()
    return get_config_dir() / "journal.db"


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write the default configuration to disk.

    Returns:
        Path of the written file.
    """
    config_path = config_path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return config_path
