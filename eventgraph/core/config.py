# eventgraph/core/config.py

from typing import List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment; a local .env file is optional.
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    # --- Required, no defaults ---
    DATABASE_URL: str = Field(min_length=1)
    JWT_SECRET: str = Field(min_length=1)

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # --- Auth ---
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_HOURS: int = 24
    BCRYPT_ROUNDS: int = 12

    # --- Pagination ---
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    @model_validator(mode="after")
    def check_production_secret(self) -> "Settings":
        if not self.JWT_SECRET.strip():
            raise ValueError("JWT_SECRET must not be blank")
        if self.ENV == "prod" and len(self.JWT_SECRET) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters in prod")
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Create a single instance of the settings
settings = Settings()
