import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    APP_VERSION: str = "2.0.0"
    API_TITLE: str = "Canada AIA Assessment API"

    # --- CONFIG ---
    ENV = os.getenv("AIA_ENV", "production")
    # optional JSON catalog replacing the bundled sample
    CATALOG_PATH = os.getenv("AIA_CATALOG_PATH") or None
    CORS_ORIGINS = [o.strip() for o in os.getenv("AIA_CORS_ORIGINS", "*").split(",") if o.strip()]


@lru_cache
def get_settings():
    return Settings()
