from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application configuration with environment variable support"""

    # Catalog
    CATALOG_FILE: str = str(PACKAGE_DIR / "data" / "questionnaire.json")

    # Scoring settings
    RECOMMENDATION_CAP: int = 3
    HIGH_LEVEL_THRESHOLD: float = 70.0
    MEDIUM_LEVEL_THRESHOLD: float = 40.0

    # Presentation
    LANGUAGE: str = "uk"
    EXPORT_DIR: str = "exports"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
