# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .document_service import AlbumService, DocumentService, TourService
from .singleton_service import AboutService, SingletonService, SiteSettingsService
from .storage_service import StorageService
from .video_service import HeroService, VideoService

__all__ = [
    "AboutService",
    "AlbumService",
    "DocumentService",
    "HeroService",
    "SingletonService",
    "SiteSettingsService",
    "StorageService",
    "TourService",
    "VideoService",
]
