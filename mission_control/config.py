"""Application configuration from environment variables."""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Mission Control"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./mission_control.db"
    DATABASE_ECHO: bool = False

    # Workspace (markdown memory notes)
    WORKSPACE_ROOT: Path = Path.home() / ".openclaw" / "workspace-main"
    MEMORY_DIR_NAME: str = "memory"
    MEMORY_FILE_NAME: str = "MEMORY.md"

    # Heartbeat
    HEARTBEAT_ENABLED: bool = True
    HEARTBEAT_INTERVAL_SECONDS: float = 30.0

    # Logs API
    LOGS_FETCH_LIMIT: int = 50

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
