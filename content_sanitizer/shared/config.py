"""Application configuration using Pydantic Settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from content_sanitizer.compliance.patterns import build_pattern_set, normalize_keywords


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = "content-sanitizer"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Sanitizer settings
    SANITIZER_EXTRA_KEYWORDS: list[str] = []
    SANITIZE_ON_READ: bool = True

    # Messaging settings
    MAX_MESSAGE_LENGTH: int = 2000

    @model_validator(mode="after")
    def validate_extra_keywords(self):
        """Normalize extra keywords and reject any that would match the placeholder."""
        self.SANITIZER_EXTRA_KEYWORDS = list(normalize_keywords(self.SANITIZER_EXTRA_KEYWORDS))
        if self.SANITIZER_EXTRA_KEYWORDS:
            build_pattern_set(extra_keywords=self.SANITIZER_EXTRA_KEYWORDS)
        return self

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
