"""
app.py
──────
i18n Explorer: Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Load the translation document (settings.TRANSLATIONS_PATH)
  3. Create Dash app with DARKLY bootstrap theme
  4. Register all callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.i18n.translator import I18n
from src.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("i18n_explorer")

# ── 2. Translations ───────────────────────────────────────────────────────────
logger.info("Loading translations from %s", settings.TRANSLATIONS_PATH)
i18n = I18n.from_file(settings.TRANSLATIONS_PATH, fallback_locale=settings.FALLBACK_LANG)
logger.info("Translations ready: %s", ", ".join(i18n.locales))

lang = settings.DEFAULT_LANG if i18n.has_locale(settings.DEFAULT_LANG) else i18n.locales[0]

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="i18n Explorer",
)

server = app.server  # gunicorn entry point
app.layout = create_layout(i18n, lang)

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import coverage, lookup, navigation

navigation.register(app, i18n, lang)
lookup.register(app, i18n)
coverage.register(app, i18n)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
