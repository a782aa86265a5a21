"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    environment: str = "development"
    app_url: str = "http://localhost:3000"
    backend_port: int = 8000

    # Calendar export
    calendar_uid_domain: str = "landlordshield.vercel.app"
    calendar_prodid: str = "-//LandlordShield//Compliance Calendar//EN"

    # Deadline feeds
    upcoming_deadlines_limit: int = 10
    report_deadlines_limit: int = 20

    # Background Jobs (Celery + Redis)
    redis_url: str = "redis://localhost:6379/0"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
