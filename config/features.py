"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === SEARCH ===
    SEARCH_ENABLED: bool = os.getenv("SEARCH_ENABLED", "true").lower() == "true"

    # === SESSION ===
    # Surface a failed /logout to the user (navigation to landing happens either way)
    STRICT_LOGOUT: bool = os.getenv("STRICT_LOGOUT", "false").lower() == "true"
    # Pause before sending the user back to login once the session is gone
    SESSION_EXPIRED_REDIRECT_SECONDS: float = float(os.getenv("SESSION_EXPIRED_REDIRECT_SECONDS", "2"))

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "search_enabled": cls.SEARCH_ENABLED,
            "strict_logout": cls.STRICT_LOGOUT,
            "session_expired_redirect_seconds": cls.SESSION_EXPIRED_REDIRECT_SECONDS,
            "debug_mode": cls.DEBUG_MODE,
        }


# Shortcut
features = Features()
