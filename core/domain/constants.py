"""
Domain constants - feed categories, limits and other static data.
Centralized here for easy modification.
"""

from core.domain.models import PostType

# UI feed categories mapped to the stored post type.
# "all" means no filter; raw post type values are accepted as well.
FEED_FILTERS = {
    "all": None,
    "highlights": PostType.VIDEO,
    "matches": PostType.STATS,
    "achievements": PostType.ACHIEVEMENT,
    "shared": PostType.SHARED,
}

# Connections
SUGGESTED_PAGE_SIZE = 5

# Search
MIN_SEARCH_LENGTH = 3
MAX_SEARCH_RESULTS = 20

# Limits
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 30
MIN_PASSWORD_LENGTH = 6
MAX_POST_LENGTH = 5000
MAX_COMMENT_LENGTH = 1000
MAX_MESSAGE_LENGTH = 2000
MAX_BIO_LENGTH = 500

# Sessions
SESSION_TOKEN_BYTES = 32
DEFAULT_SESSION_TTL_HOURS = 24 * 30

# Scouting insights are mock numbers: (base, spread)
SCOUTING_PROFILE_VIEWS = (20, 15)
SCOUTING_HIGHLIGHT_VIEWS = (143, 50)
SCOUTING_OPPORTUNITY_MATCHES = (5, 5)


def resolve_feed_filter(label: str | None) -> PostType | None:
    """
    Map a UI category label (or raw post type) to the stored post type.
    Returns None for "all". Raises ValueError for unknown labels.
    """
    if not label:
        return None
    key = label.strip().lower()
    if key in FEED_FILTERS:
        return FEED_FILTERS[key]
    return PostType(key)
