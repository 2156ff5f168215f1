from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    processors: list[str] = ["text", "html"]

    text_processing_delay_ms: int = 100
    html_processing_delay_ms: int = 200
