"""Default configuration values for the service.

All hardcoded defaults live here. The service starts with these defaults,
but analysis requests fail until YOUTUBE_API_KEY is provided.

Config hierarchy: .env → environment → these defaults
"""

from typing import Any

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULTS: dict[str, Any] = {
    # -------------------------------------------------------------------------
    # Upstream credential (empty = not configured)
    # -------------------------------------------------------------------------
    "YOUTUBE_API_KEY": "",

    # -------------------------------------------------------------------------
    # Service Settings
    # -------------------------------------------------------------------------
    "SERVICE_NAME": "social-video-api",
    "LOG_LEVEL": "INFO",
    "API_HOST": "0.0.0.0",
    "API_PORT": 8000,
    "CORS_ORIGINS": "*",  # Comma-separated list
}


# =============================================================================
# Sensitive Keys (masked in logs and health output)
# =============================================================================

SENSITIVE_KEYS = {
    "YOUTUBE_API_KEY",
}


def get_default(key: str) -> Any:
    """Get the default value for a config key.

    Args:
        key: Configuration key name

    Returns:
        Default value, or None if key not found
    """
    return DEFAULTS.get(key)
