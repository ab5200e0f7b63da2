"""
Configuration settings for the Surplus Sales inventory service.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Surplus Sales Management System"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://surplus_user:surplus_pass@db:5432/surplus_db"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_statement_timeout: float = 10.0  # seconds

    # Security
    secret_key: str = "your-secret-key-change-this-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 4320  # 72 hours
    password_min_length: int = 8

    # CORS
    cors_origins: list[str] = ["*"]

    # API
    api_prefix: str = "/api"

    # Inventory
    default_image_url: str = (
        "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQU0N_pZ1FmfWhbnKjb-rlqcfOO65_PRLhvTg&s"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
