"""Configuration management for the SWOT AI Proxy.

Uses Pydantic Settings for type-safe configuration with .env file support.
The Gemini API key is loaded from the environment and never leaves the server.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Gemini API
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_base: str = DEFAULT_GEMINI_API_BASE
    # None means the outbound call waits until the hosting platform gives up
    gemini_timeout: float | None = None

    # Service Configuration
    port: int = 8000
    allowed_origins: str = "http://localhost:3000"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
