"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.

Components never read os.environ themselves; they receive a Settings
instance (FastAPI dependency or constructor argument).
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Generative AI provider (OpenAI-compatible endpoint, Gemini by default)
    gemini_api_key: str = ""
    ai_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    ai_model: str = "gemini-1.5-flash"
    ai_timeout_seconds: Optional[float] = None

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "freshers_jobs"

    # Outbound mail (Gmail SMTP by default)
    mail_user: str = ""
    mail_pass: str = ""
    mail_host: str = "smtp.gmail.com"
    mail_port: int = 587
    mail_sender_name: str = "Freshers Jobs"
    site_url: str = "https://freshersjobs.shop"

    # Daily job digest
    digest_enabled: bool = True
    digest_hour: int = 10
    digest_minute: int = 25

    # App
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @property
    def ai_configured(self) -> bool:
        """True when a provider credential is present."""
        return bool(self.gemini_api_key)

    @property
    def mail_configured(self) -> bool:
        return bool(self.mail_user and self.mail_pass)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
