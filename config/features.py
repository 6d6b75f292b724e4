"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === FEED ===
    # Options: "global" (every post), "connections" (own posts + accepted connections)
    FEED_DEFAULT_SCOPE: str = os.getenv("FEED_DEFAULT_SCOPE", "global")

    # === NETWORK ===
    SUGGESTED_PAGE_SIZE: int = int(os.getenv("SUGGESTED_PAGE_SIZE", "5"))

    # === SCOUTING ===
    SCOUTING_INSIGHTS_ENABLED: bool = os.getenv("SCOUTING_INSIGHTS_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "feed_default_scope": cls.FEED_DEFAULT_SCOPE,
            "suggested_page_size": cls.SUGGESTED_PAGE_SIZE,
            "scouting_insights_enabled": cls.SCOUTING_INSIGHTS_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
        }


# Shortcut
features = Features()
