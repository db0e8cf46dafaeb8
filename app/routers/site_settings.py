# =============================================================================
# app/routers/site_settings.py - Website Settings Endpoints
# =============================================================================


from fastapi import APIRouter

from core.models import SiteSettingsResponse, SiteSettingsUpdate
from core.services.singleton_service import SiteSettingsService

router = APIRouter()


@router.get("", response_model=SiteSettingsResponse)
async def get_site_settings():
    """Get the website settings (created with defaults on first read)."""
    return SiteSettingsService.get_or_create()


@router.put("", response_model=SiteSettingsResponse)
async def update_site_settings(request: SiteSettingsUpdate):
    """
    Update the website settings.

    Only fields present in the body change. Inside `socialMedia`, only the
    platforms present change.
    """
    return SiteSettingsService.update(request.model_dump(mode="json", exclude_unset=True))
