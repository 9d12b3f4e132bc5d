"""
Utility modules for sreader.

This package contains configuration shared by the reader and the CLI.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
