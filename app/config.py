from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "DSA Tracker"
    API_VERSION: str = "0.1.0"
    ENV: str = "development"
    FRONTEND_URL: str = "http://localhost:3000"

    # tokens are issued by the hosted auth provider with this shared secret
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "dsa_tracker"
    DATABASE_URL: Optional[str] = None

    STREAK_TIMEZONE: str = "UTC"
    STREAK_MAX_RETRIES: int = 5
    HEATMAP_DAYS: int = 365

    LOG_LEVEL: str = "INFO"


settings = Settings()
