"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.

Only the explorer app reads these; the translation store takes explicit
arguments.
"""
import os
from dataclasses import dataclass
from pathlib import Path

_BUNDLED_TRANSLATIONS = Path(__file__).resolve().parent.parent / "src" / "i18n" / "locales" / "translations.json"


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Translation document (JSON, keyed by locale)
    TRANSLATIONS_PATH: str = os.getenv("TRANSLATIONS_PATH", str(_BUNDLED_TRANSLATIONS))

    # i18n
    FALLBACK_LANG: str = os.getenv("FALLBACK_LANG", "en")
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
