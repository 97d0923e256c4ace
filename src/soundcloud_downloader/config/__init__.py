"""Configuration - settings and environment."""

from .settings import DEFAULT_API_HOST, Environment, LogLevel, Settings, build_settings

__all__ = [
    "DEFAULT_API_HOST",
    "Environment",
    "LogLevel",
    "Settings",
    "build_settings",
]
