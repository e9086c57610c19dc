from pydantic import Field

from libhub.feature_flags import FeatureFlags
from libhub.infrastructure.common.schemas.camel_model import CamelModel


class AppSettingsResponse(CamelModel):
    feature_flags: FeatureFlags = Field(..., description="All feature flags")
