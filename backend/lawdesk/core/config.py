# backend/lawdesk/core/config.py

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


# -----------------------------------------------------
# 1) backend/.env absolute path
# -----------------------------------------------------
# this file: backend/lawdesk/core/config.py
# parents[2] = backend/
BASE_DIR = Path(__file__).resolve().parents[2]
ENV_PATH = BASE_DIR / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


# -----------------------------------------------------
# 2) Settings
# -----------------------------------------------------
class Settings(BaseSettings):
    # --- App Metadata ---
    APP_NAME: str = "LawDesk API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'lawdesk.db'}"

    # --- Sessions ---
    SESSION_TTL_DAYS: int = 7
    SESSION_COOKIE_NAME: str = "sid"
    SESSION_COOKIE_SECURE: bool = False

    # --- Console / CORS ---
    CONSOLE_URL: str = "http://localhost:8501"
    CORS_ORIGINS: List[str] = ["http://localhost:8501"]

    # --- First admin account ---
    BOOTSTRAP_ADMIN_EMAIL: Optional[str] = None
    BOOTSTRAP_ADMIN_PASSWORD: Optional[str] = None

    class Config:
        env_file = ENV_PATH
        env_file_encoding = "utf-8"
        extra = "ignore"


# -----------------------------------------------------
# 3) cached settings
# -----------------------------------------------------
@lru_cache
def get_settings():
    return Settings()


settings = get_settings()
