"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Path2Placement backend (prediction, insights, finder, resume analysis, auth)
    backend_base_url: str = "https://path2placement-backend.onrender.com/api"
    request_timeout_seconds: float = 30.0

    # Hosted placement table (Supabase Postgres)
    supabase_db_host: str = "localhost"
    supabase_db_port: int = 5432
    supabase_db_user: str = "postgres"
    supabase_db_password: str = "password"
    supabase_db_name: str = "postgres"
    database_url: str = ""
    placements_table: str = "College_Placements_Data"

    # Local storage (one key-value file holding the bearer token)
    storage_path: str = "~/.path2placement/local_storage.json"
    auth_token_key: str = "authToken"

    # Resume upload limits
    max_resume_size_mb: int = 5

    # App
    debug: bool = True

    @property
    def postgres_url(self) -> str:
        """Connection URL for the placement table; DATABASE_URL wins when set."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.supabase_db_user}:{self.supabase_db_password}"
            f"@{self.supabase_db_host}:{self.supabase_db_port}/{self.supabase_db_name}"
        )

    @property
    def resolved_storage_path(self) -> str:
        return os.path.expanduser(self.storage_path)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
