"""
Application settings
"""
import os
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Deployment mode: desktop uses an embedded SQLite file, hosted uses DATABASE_URL
    desktop: bool = False
    data_dir: str = "."
    database_url: Optional[str] = None

    admin_username: str = "admin"
    admin_password: str = "admin123"
    seed_defaults: bool = True

    session_cookie_name: str = "lounge.sid"
    session_max_age_ms: int = 24 * 60 * 60 * 1000
    session_prune_interval_seconds: float = 60 * 60
    cookie_secure: bool = False

    cors_origins: str = "*"
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the database URL for the selected deployment mode"""
        if self.database_url:
            return self.database_url
        if self.desktop:
            db_dir = os.path.join(self.data_dir, "data")
            os.makedirs(db_dir, exist_ok=True)
            return f"sqlite:///{os.path.join(db_dir, 'gaming-pos.db')}"
        raise ValueError("DATABASE_URL must be set when not running in desktop mode")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
