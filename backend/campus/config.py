"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (the default key is for local dev only)
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box locally
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    jwt_secret_key: str = "campus-dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24
    bcrypt_rounds: int = 12

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt accepts work factors 4..31."""
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    # Data
    seed_demo_data: bool = True

    # API
    host: str = "0.0.0.0"
    port: int = 5000
    graphql_path: str = "/graphql"
    graphiql_enabled: bool = True
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
