"""
Config Module
Configuration management.
"""

from .settings import (
    Config,
    ConfigManager,
    get_home_dir,
    get_publish_url,
    get_publish_token,
    get_publish_timeout,
)

__all__ = [
    "Config",
    "ConfigManager",
    "get_home_dir",
    "get_publish_url",
    "get_publish_token",
    "get_publish_timeout",
]
