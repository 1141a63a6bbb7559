"""
Application configuration settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"],
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field("Presentation Service API", alias="APP_NAME")
    app_version: str = Field("1.0.0", alias="APP_VERSION")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Storage
    storage_backend: str = Field("sql", alias="STORAGE_BACKEND")
    database_url: str = Field(
        "sqlite+aiosqlite:///./presentations.db", alias="DATABASE_URL"
    )
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # Schema rules
    min_title_length: int = Field(3, alias="MIN_TITLE_LENGTH")
    min_author_length: int = Field(3, alias="MIN_AUTHOR_LENGTH")
    min_authors: int = Field(1, alias="MIN_AUTHORS")
    min_topic_length: int = Field(3, alias="MIN_TOPIC_LENGTH")
    min_body_length: int = Field(3, alias="MIN_BODY_LENGTH")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
