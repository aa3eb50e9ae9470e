# backend/medisafe/config.py
import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Runtime settings for the safety engine and its API."""

    # Remote drug-label source (openFDA)
    OPENFDA_BASE: str = os.getenv("OPENFDA_BASE", "https://api.fda.gov")
    OPENFDA_LIMIT: int = int(os.getenv("OPENFDA_LIMIT", "10"))
    REMOTE_TIMEOUT_SECONDS: float = float(os.getenv("REMOTE_TIMEOUT_SECONDS", "5"))

    # Translation collaborator (MyMemory)
    TRANSLATION_URL: str = os.getenv("TRANSLATION_URL", "https://api.mymemory.translated.net/get")
    TRANSLATION_TIMEOUT_SECONDS: float = float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "5"))
    TRANSLATION_CACHE_SIZE: int = int(os.getenv("TRANSLATION_CACHE_SIZE", "1000"))
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")

    # Search thresholds
    SEARCH_MIN_QUERY_LENGTH: int = int(os.getenv("SEARCH_MIN_QUERY_LENGTH", "1"))
    REMOTE_MIN_QUERY_LENGTH: int = int(os.getenv("REMOTE_MIN_QUERY_LENGTH", "3"))

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./medisafe.db")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Used by the Streamlit dashboard
    API_BASE: str = os.getenv("API_BASE", "http://localhost:8000")

    class Config:
        case_sensitive = True


settings = Settings()
