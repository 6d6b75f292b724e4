from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Storage: "memory" for local/dev, "supabase" for production
    storage_backend: str = "memory"
    seed_on_start: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"  # staging can point at an isolated schema
    db_max_workers: int = 10

    # Auth
    session_ttl_hours: int = 24 * 30

    # Environment
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = "footlink.log"

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('storage_backend')
    @classmethod
    def check_backend(cls, v):
        v = v.lower()
        if v not in ("memory", "supabase"):
            raise ValueError("storage_backend must be 'memory' or 'supabase'")
        return v

    @property
    def supabase_api_key(self) -> str:
        """Service key when present, otherwise the anon key"""
        return self.supabase_service_key or self.supabase_key

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )


# Create settings instance
settings = Settings()
