from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_DRIVERS = ("+asyncpg", "+aiosqlite", "+psycopg", "+aiomysql", "+asyncmy")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Issue Tracker"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Database
    database_url: str = "sqlite+aiosqlite:///./issues.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Require an async driver - the store runs on SQLAlchemy's asyncio extension."""
        scheme = v.split("://", 1)[0]
        if not any(scheme.endswith(driver) for driver in ASYNC_DRIVERS):
            raise ValueError(
                f"DATABASE_URL scheme '{scheme}' is not an async driver. "
                "Use e.g. postgresql+asyncpg:// or sqlite+aiosqlite://"
            )
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
