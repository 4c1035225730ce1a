"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the translation store test suite.
"""
import json

import pytest


@pytest.fixture
def sample_document() -> dict:
    return {
        "en": {
            "greeting": "Hello",
            "user": {"greeting": "Welcome back", "profile": {"title": "Your profile"}},
            "cart": {"items": 3, "empty": "Your cart is empty"},
            "features": {"beta": True},
            "weekdays": ["Monday", "Tuesday"],
            "only_en": "English only",
        },
        "id": {
            "greeting": "Halo",
            "user": {"greeting": "Selamat datang kembali", "profile": {"title": None}},
            "cart": {"empty": "Keranjang Anda kosong", "voucher": "Gunakan voucher"},
            "weekdays": ["Senin", "Selasa"],
        },
    }


@pytest.fixture
def i18n(sample_document):
    from src.i18n.translator import I18n
    return I18n(sample_document)


@pytest.fixture
def translations_file(tmp_path, sample_document):
    path = tmp_path / "translations.json"
    path.write_text(json.dumps(sample_document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def recorded_missing() -> list:
    """List collecting (path, locale) pairs passed to the missing-content hook."""
    return []


@pytest.fixture
def recording_i18n(sample_document, recorded_missing):
    from src.i18n.translator import I18n
    return I18n(sample_document, on_missing=lambda path, locale: recorded_missing.append((path, locale)))
