"""Application settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine configuration from environment variables."""

    currency: str = "EGP"
    log_level: str = "INFO"
    history_max_records: int = Field(500, ge=1)
    laws_file: str = "laws.yaml"

    model_config = {"env_file": ".env", "env_prefix": "EGTAX_", "extra": "ignore"}


settings = Settings()
