"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # System Configuration
    api_v1_prefix: str = "/api/v1"
    debug: bool = False
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    log_level: str = "INFO"

    # Inventory REST API
    inventory_api_url: str = "https://xe11sqsoyk.execute-api.us-east-1.amazonaws.com"
    http_timeout_seconds: float = 10.0

    # Supabase Auth Configuration
    supabase_url: str = "https://test.supabase.co"
    supabase_anon_key: str = "test-anon-key"

    # Session cache (unset keeps the session in memory only)
    session_cache_path: str | None = None
    session_expiry_leeway_seconds: int = 10  # Clock skew tolerance

    # Dashboard
    low_stock_threshold: int = 10


settings = Settings()
