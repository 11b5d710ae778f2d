from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Phone Catalog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["*"]

    # MongoDB
    mongodb_url: str = "mongodb://127.0.0.1:27017"
    mongodb_database: str = "phones"
    mongodb_timeout_ms: int = 3000

    # Used for hypermedia links only when a request carries no Host header
    public_base_url: str = "http://localhost:8000"

    # File upload & storage
    upload_dir: str = "uploads"
    max_upload_size_mb: int = 10

    # Login / bearer tokens
    basic_user: str = "admin"
    basic_pass: str = "admin"
    jwt_secret: str = "dev_secret_change_me"
    jwt_expires_minutes: int = 60

    # Seeding
    seed_default_amount: int = 10
    seed_min_amount: int = 5
    seed_max_amount: int = 1000
    placeholder_image_base: str = "https://picsum.photos/seed"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_mongo: str = "WARNING"         # pymongo driver
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
