"""
Helper utilities for Symbolic.

Provides common functions used across the pipelines:
- Settings loading
- Logging setup
- Export directory resolution
"""

import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

SETTINGS_PATH = Path.home() / ".config" / "symbolic" / "settings.toml"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a TOML file.

    Args:
        path: Settings file, defaults to ~/.config/symbolic/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "search": {
                "max_workers": 4
            },
            "catalogs": {
                "order": ["material-design", "sf-symbols"]
            },
            "export": {
                "directory": "",
                "format": "PNG",
                "max_workers": 4,
                "icon_set": "macOS"
            },
            "logging": {
                "level": "INFO"
            }
        }
    """
    # Default settings
    defaults = {
        "search": {
            "max_workers": 4,
        },
        "catalogs": {
            "order": ["material-design", "sf-symbols"],
        },
        "export": {
            "directory": "",
            "format": "PNG",
            "max_workers": 4,
            "icon_set": "macOS",
        },
        "logging": {
            "level": "INFO",
        },
    }

    settings_path = Path(path) if path else SETTINGS_PATH

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def configure_logging(level: str = "INFO") -> None:
    """Send log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def export_directory(settings: Dict[str, Any]) -> Path:
    """Directory for exported snapshots; the system temp dir unless configured."""
    configured = settings["export"].get("directory")
    if configured:
        return Path(configured).expanduser()
    return Path(tempfile.gettempdir())
