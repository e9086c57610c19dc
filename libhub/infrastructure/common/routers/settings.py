from fastapi import APIRouter

from libhub.feature_flags import get_feature_flags
from libhub.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Lets clients hide the sign-up form when registrations are closed. No
    authentication required.
    """
    return AppSettingsResponse(feature_flags=get_feature_flags())
