"""Application configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # App settings
    app_name: str = "Sixth Man Injury Tracker"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Redistribution factors
    minute_redistribution_factor: float = 0.85
    usage_redistribution_factor: float = 0.70

    # Roster parsing
    max_teammates: int = 4
    default_teammate_minutes: float = 25.0
    default_teammate_usage: float = 20.0

    # Local injury state
    data_dir: Path = Path(os.getenv("SIXTHMAN_DATA_DIR", "~/.sixthman")).expanduser()
    injury_file: Path = Path(
        os.getenv("SIXTHMAN_INJURY_FILE", "~/.sixthman/injuries.json")
    ).expanduser()

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
