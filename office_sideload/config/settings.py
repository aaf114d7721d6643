"""
Settings
Configuration management for Office Sideload.

Everything is read from the environment; a .env file in the working
directory is loaded first.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file
load_dotenv()


DEFAULT_PUBLISH_TIMEOUT = 30.0


def get_home_dir() -> Path:
    """Get the home directory the sideload folders live under.
    
    Uses OFFICE_SIDELOAD_HOME env var if set, otherwise the user's home.
    """
    env_home = os.environ.get("OFFICE_SIDELOAD_HOME")
    if env_home:
        return Path(os.path.expanduser(env_home))
    return Path.home()


def get_publish_url() -> str:
    """Get the base URL add-in packages are published to.
    
    Raises ValueError if not set.
    """
    url = os.environ.get("OFFICE_SIDELOAD_PUBLISH_URL")
    if not url:
        raise ValueError(
            "OFFICE_SIDELOAD_PUBLISH_URL environment variable is required to publish "
            "a package manifest (e.g., https://addins.example.com/api)"
        )
    return url.rstrip("/")


def get_publish_token() -> Optional[str]:
    """Get the bearer token for the publish endpoint, if any."""
    return os.environ.get("OFFICE_SIDELOAD_PUBLISH_TOKEN") or None


def get_publish_timeout() -> float:
    """Get the HTTP timeout (seconds) used when publishing."""
    value = os.environ.get("OFFICE_SIDELOAD_PUBLISH_TIMEOUT")
    if not value:
        return DEFAULT_PUBLISH_TIMEOUT
    try:
        return float(value)
    except ValueError:
        raise ValueError(
            f"OFFICE_SIDELOAD_PUBLISH_TIMEOUT must be a number of seconds, got '{value}'"
        ) from None


@dataclass
class Config:
    """Runtime configuration."""
    home_dir: Path = field(default_factory=get_home_dir)
    publish_url: Optional[str] = None
    publish_token: Optional[str] = None
    publish_timeout: float = DEFAULT_PUBLISH_TIMEOUT
    
    @property
    def can_publish(self) -> bool:
        return bool(self.publish_url)


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    async def load(self) -> None:
        """Load configuration from environment."""
        self._config = Config(
            home_dir=get_home_dir(),
            publish_url=get_publish_url() if os.getenv("OFFICE_SIDELOAD_PUBLISH_URL") else None,
            publish_token=get_publish_token(),
            publish_timeout=get_publish_timeout(),
        )
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
