"""Configuration manager with hierarchy: .env → environment → defaults.

This module provides a centralized way to access configuration values:
1. A .env file at the git root is loaded into the environment on startup
2. Environment variables always take precedence
3. Sensible hardcoded defaults (service starts out of the box)

Usage:
    from socialvideo.lib.config_manager import config

    api_key = config.get("YOUTUBE_API_KEY")
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from socialvideo.lib.defaults import SENSITIVE_KEYS, get_default

logger = logging.getLogger(__name__)


def _find_git_root(start_path: Optional[Path] = None) -> Path:
    """Walk up directory tree to find .git/ folder."""
    current = start_path or Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    raise FileNotFoundError("No .git directory found in any parent directory")


def _coerce_type(value: str, default: Any) -> Any:
    """Coerce string value to match the type of the default.

    Args:
        value: String value from the environment
        default: Default value (determines target type)

    Returns:
        Value coerced to appropriate type
    """
    if default is None:
        return value

    if isinstance(default, bool):
        return value.lower() in ("true", "1", "yes", "on")
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    if isinstance(default, float):
        try:
            return float(value)
        except ValueError:
            return default
    return value


class ConfigManager:
    """Manages configuration with .env → environment → defaults hierarchy.

    The manager loads .env on initialization. Values are read from the
    environment on every access so tests can patch os.environ freely.
    """

    def __init__(self, load_env: bool = True):
        """Initialize the config manager and optionally load .env."""
        self._env_loaded = False
        if load_env:
            self._load_env()

    def _load_env(self) -> None:
        """Load .env file from git root."""
        if self._env_loaded:
            return

        try:
            git_root = _find_git_root()
            env_path = git_root / ".env"
            if env_path.exists():
                # Real environment wins over the file
                load_dotenv(dotenv_path=env_path, override=False)
                logger.debug(f"Loaded .env from {env_path}")
            else:
                logger.debug(f"No .env file found at {env_path}")
        except FileNotFoundError:
            logger.debug("Could not find git root, .env not loaded")

        self._env_loaded = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value (.env/environment → defaults).

        Args:
            key: Configuration key
            default: Override default (uses DEFAULTS if not provided)

        Returns:
            Configuration value
        """
        env_value = os.getenv(key)
        if env_value is not None:
            default_val = default if default is not None else get_default(key)
            return _coerce_type(env_value, default_val)

        if default is not None:
            return default
        return get_default(key)

    def get_list(self, key: str) -> list[str]:
        """Get a comma-separated config value as a list of stripped items."""
        raw = self.get(key) or ""
        return [item.strip() for item in str(raw).split(",") if item.strip()]

    def is_sensitive(self, key: str) -> bool:
        """Check if a key contains sensitive data."""
        return key in SENSITIVE_KEYS

    def mask_value(self, key: str, value: Any) -> str:
        """Mask sensitive values for display.

        Args:
            key: Configuration key
            value: Value to potentially mask

        Returns:
            Masked or original value as string
        """
        if not self.is_sensitive(key):
            return str(value)

        str_value = str(value)
        if not str_value:
            return ""
        if len(str_value) <= 8:
            return "*" * len(str_value)
        return str_value[:4] + "*" * (len(str_value) - 8) + str_value[-4:]


# Singleton instance
config = ConfigManager()


def get_config(key: str, default: Any = None) -> Any:
    """Get config value from the shared manager."""
    return config.get(key, default)
