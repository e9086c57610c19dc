"""Feature flags module for centralized feature toggle management."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from libhub.config import get_settings


class FeatureFlags(BaseModel):
    """Pydantic model defining all feature flags in the application."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_registrations: bool = Field(..., description="Whether user registration is enabled")
    remote_catalog: bool = Field(
        ..., description="Whether loans reach the catalog over HTTP instead of in-process"
    )


FeatureFlagKey = Literal["user_registrations", "remote_catalog"]


def get_feature_flags() -> FeatureFlags:
    """Get current feature flags based on application configuration."""
    settings = get_settings()

    return FeatureFlags(
        user_registrations=settings.ALLOW_USER_REGISTRATIONS,
        remote_catalog=settings.catalog_mode == "http",
    )


def get_feature_flag(key: FeatureFlagKey) -> bool:
    flags = get_feature_flags()
    return getattr(flags, key)


def is_user_registrations_enabled() -> bool:
    """Check if user registrations are enabled."""
    return get_feature_flag("user_registrations")
