"""
src/i18n/errors.py
──────────────────
Exceptions raised while building a translation store.

Lookups never raise: missing paths and conversion failures resolve to the
caller's default. Only construction can fail.
"""


class TranslationError(Exception):
    """Base class for translation store errors."""


class DocumentReadError(TranslationError, OSError):
    """Raised when a translation file is missing, unreadable or empty."""


class DocumentParseError(TranslationError, ValueError):
    """Raised when a translation file does not contain valid JSON."""


class InvalidDocumentError(TranslationError, ValueError):
    """Raised when a translation document is not a non-empty mapping."""
