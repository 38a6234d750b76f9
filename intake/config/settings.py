from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    accept_spec: str = "*"
    max_file_size_bytes: PositiveInt | None = None
    allow_multiple: bool = True

    compression_enabled: bool = False
    compression_engine: str = "pillow"
    compression_orientation: int = -1
    compression_ratio: PositiveInt | None = None
    compression_quality: PositiveInt | None = None
    compression_max_width: PositiveInt | None = None
    compression_max_height: PositiveInt | None = None
    compression_default_ratio: PositiveInt = 50
    compression_default_quality: PositiveInt = 50
