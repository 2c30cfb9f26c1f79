# Symbolic Utilities Package
"""
Shared utility functions and helpers for Symbolic.
"""

from .helpers import configure_logging, export_directory, load_settings

__all__ = ["configure_logging", "export_directory", "load_settings"]
