"""
src/i18n/models.py
──────────────────
Pydantic v2 models for translation documents, lookup traces and coverage.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, RootModel


class TranslationDocument(RootModel[dict[str, Any]]):
    """Top-level document: locale code → locale tree."""


class ResolutionSource(str, Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"
    DEFAULT = "default"


class LookupTrace(BaseModel):
    path: str
    locale: str
    fallback_locale: str
    source: ResolutionSource
    value: Any = None
    available_elsewhere: bool


class LocaleCoverage(BaseModel):
    locale: str
    total_keys: int = Field(ge=0)
    translated_keys: int = Field(ge=0)
    missing_keys: int = Field(ge=0)
    coverage_pct: float = Field(ge=0.0, le=100.0)
