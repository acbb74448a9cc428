"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- Cached settings access via get_settings()
"""

from .settings import (
    LogFormat,
    LogLevel,
    ProbeSettings,
    WorkspaceSettings,
    get_settings,
)

__all__ = [
    # Main settings
    "ProbeSettings",
    "get_settings",
    # Enums
    "LogLevel",
    "LogFormat",
    # Component settings
    "WorkspaceSettings",
]
