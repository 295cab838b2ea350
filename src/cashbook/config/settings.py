"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".cashbook"


class Settings(BaseSettings):
    """Application configuration loaded from CASHBOOK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CASHBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Cashbook"
    app_version: str = "0.1.0"

    # Data directory (database lives here unless database_url is set)
    data_dir: Optional[Path] = None

    # Async SQLAlchemy URL, e.g. sqlite+aiosqlite:///path/to/cashbook.db
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Dashboard behaviour
    recent_transactions_limit: int = 5

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "cashbook.db"
        return f"sqlite+aiosqlite:///{db_path}"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
