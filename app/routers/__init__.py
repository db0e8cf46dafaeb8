# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by website section:
# - health.py: Health check endpoints
# - music.py: Album CRUD and cover uploads
# - videos.py: Video CRUD and video uploads
# - tours.py: Tour date CRUD
# - hero.py: Homepage hero video (singleton)
# - site_settings.py: Website settings (singleton)
# - about.py: Biography (singleton)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import about
from . import health
from . import hero
from . import music
from . import site_settings
from . import tours
from . import videos

__all__ = [
    "about",
    "health",
    "hero",
    "music",
    "site_settings",
    "tours",
    "videos",
]
