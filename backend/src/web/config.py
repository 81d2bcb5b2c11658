"""
Web Configuration - Centralized settings management
"""
import os
from pathlib import Path

from pydantic import BaseModel
from dotenv import load_dotenv

# Optional backend/.env overrides for local runs
_backend_env = Path(__file__).parent.parent.parent / ".env"
if _backend_env.exists():
    load_dotenv(_backend_env)


class AppConfig(BaseModel):
    """Application configuration with environment variable support"""

    app_name: str = "Task Tracker API"
    version: str = "1.0.0"

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables"""
        return cls(
            host=os.getenv("TASKS_HOST", "127.0.0.1"),
            port=int(os.getenv("TASKS_PORT", "8080")),
            debug=os.getenv("TASKS_DEBUG", "0") == "1",
            log_level=os.getenv("TASKS_LOG_LEVEL", "INFO").upper(),
        )


# Global config instance
config = AppConfig.from_env()
