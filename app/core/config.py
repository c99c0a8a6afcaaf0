"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Course Catalog API"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./course_catalog.db"

    # Password hashing cost (bcrypt log rounds)
    bcrypt_rounds: int = 12

    # Routing
    api_prefix: str = "/api"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()

