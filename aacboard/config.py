from pydantic_settings import BaseSettings, SettingsConfigDict

from aacboard.composer.labels import Locale


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="AAC_", extra="ignore")

    app_name: str = "AAC Board"
    debug: bool = False
    log_level: str = "INFO"

    # Load the built-in categories and cards on startup
    seed_catalog: bool = True

    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    # Client side
    api_base_url: str = "http://localhost:8000"
    default_locale: Locale = Locale.EN_US

    # Slightly slower than normal for clarity
    speech_rate: float = 0.9
    speech_pitch: float = 1.0


settings = Settings()
