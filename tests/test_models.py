"""
tests/test_models.py
─────────────────────
Tests for Pydantic v2 models.
"""
import pytest
from pydantic import ValidationError

from src.i18n.models import LocaleCoverage, LookupTrace, ResolutionSource, TranslationDocument


class TestTranslationDocument:
    def test_valid_document(self, sample_document):
        doc = TranslationDocument.model_validate(sample_document, strict=True)
        assert list(doc.root) == ["en", "id"]

    def test_non_string_keys_rejected(self):
        with pytest.raises(ValidationError):
            TranslationDocument.model_validate({1: {}}, strict=True)

    def test_list_rejected(self):
        with pytest.raises(ValidationError):
            TranslationDocument.model_validate(["en"], strict=True)


class TestLookupTrace:
    def test_source_from_string(self):
        trace = LookupTrace(path="greeting", locale="id", fallback_locale="en", source="fallback", value="Hello", available_elsewhere=True)
        assert trace.source is ResolutionSource.FALLBACK
        assert trace.available_elsewhere is True

    def test_model_dump(self):
        trace = LookupTrace(path="x", locale="en", fallback_locale="en", source=ResolutionSource.DEFAULT, available_elsewhere=False)
        data = trace.model_dump()
        assert data["value"] is None
        assert data["source"] == ResolutionSource.DEFAULT

    def test_availability_is_required(self):
        with pytest.raises(ValidationError):
            LookupTrace(path="x", locale="en", fallback_locale="en", source=ResolutionSource.DEFAULT)


class TestLocaleCoverage:
    def test_pct_bounds(self):
        with pytest.raises(ValidationError):
            LocaleCoverage(locale="en", total_keys=1, translated_keys=2, missing_keys=0, coverage_pct=200.0)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            LocaleCoverage(locale="en", total_keys=-1, translated_keys=0, missing_keys=0, coverage_pct=0.0)
