"""
Client configuration
Loads environment variables and provides client settings
"""
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Client settings loaded from environment variables"""

    # Gateway the client talks to
    API_BASE: str = os.getenv("API_BASE", "http://localhost:5000/api")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "10.0"))

    # Local storage file standing in for browser storage
    SESSION_FILE: Path = Path(
        os.getenv("SESSION_FILE", str(Path.home() / ".luma" / "local_storage.json"))
    )
    SESSION_KEY: str = "luma_session"

    # UI
    NOTIFICATION_SECONDS: float = float(os.getenv("NOTIFICATION_SECONDS", "3.0"))
    PLACEHOLDER_IMAGE: str = "https://images.unsplash.com/photo-1549490349-8643362247b5?w=800"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()
