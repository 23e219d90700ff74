from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.models import Tier


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CAPTURE_TIERS_")

    default_tier: str = "large"
    log_level: str = "INFO"
    log_dir: str = "logs"


settings = Settings()


def get_default_tier() -> Tier:
    return Tier.normalize(settings.default_tier)
