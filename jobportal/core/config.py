"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "JobPortal"
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Storage shim: "file" (JSON files), "mongo" (key/value docs) or "memory"
    storage_backend: str = "file"
    data_dir: str = "data"
    storage_key_prefix: str = "jobportal_"

    # MongoDB (only used by the "mongo" backend)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "jobportal"
    mongodb_collection: str = "kv_store"

    # Seeded job dataset
    seed_target_jobs: int = 1100
    seed_min_jobs: int = 1000
    seed_random_seed: Optional[int] = None

    # AI assistant (OpenAI-compatible chat completions endpoint)
    ai_api_key: str = ""
    ai_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    ai_model: str = "gemini-3-flash-preview"

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Uploads
    max_resume_size_mb: int = 5

    @property
    def ai_configured(self) -> bool:
        """True when an AI API key has been provided."""
        return bool(self.ai_api_key) and self.ai_api_key != "your_api_key_here"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
