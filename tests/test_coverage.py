"""
tests/test_coverage.py
───────────────────────
Tests for the translation coverage audit.
"""
import pandas as pd
import pytest

from src.analytics.coverage import (
    coverage_frame,
    coverage_summary,
    iter_leaf_paths,
    missing_keys,
    orphan_keys,
)
from src.i18n.models import LocaleCoverage
from src.i18n.translator import I18n


class TestIterLeafPaths:
    def test_nested_leaves(self):
        tree = {"a": {"b": 1, "c": {"d": None}}, "e": [1, 2]}
        assert list(iter_leaf_paths(tree)) == ["a.b", "a.c.d", "e"]

    def test_empty_mapping_yields_nothing(self):
        assert list(iter_leaf_paths({"a": {}})) == []

    def test_scalar_root_yields_nothing(self):
        assert list(iter_leaf_paths("Hello")) == []


class TestCoverageFrame:
    def test_shape_and_columns(self, i18n):
        frame = coverage_frame(i18n)
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == ["en", "id"]
        assert len(frame) == 9
        assert frame.index.name == "path"

    def test_null_counts_as_untranslated(self, i18n):
        frame = coverage_frame(i18n)
        assert bool(frame.loc["user.profile.title", "en"]) is True
        assert bool(frame.loc["user.profile.title", "id"]) is False

    def test_sequences_are_leaves(self, i18n):
        frame = coverage_frame(i18n)
        assert frame.loc["weekdays"].all()


class TestMissingKeys:
    def test_en_missing(self, i18n):
        assert missing_keys(i18n, "en") == ["cart.voucher"]

    def test_id_missing(self, i18n):
        assert missing_keys(i18n, "id") == [
            "cart.items",
            "features.beta",
            "only_en",
            "user.profile.title",
        ]

    def test_unknown_locale(self, i18n):
        with pytest.raises(KeyError):
            missing_keys(i18n, "fr")

    def test_single_locale_store(self):
        store = I18n({"en": {"greeting": "Hello"}})
        assert missing_keys(store, "en") == []


class TestOrphanKeys:
    def test_orphans_map_to_owning_locale(self, i18n):
        orphans = orphan_keys(i18n)
        assert orphans.to_dict() == {
            "cart.items": "en",
            "cart.voucher": "id",
            "features.beta": "en",
            "only_en": "en",
            "user.profile.title": "en",
        }

    def test_orphans_trigger_missing_content_hook(self, recording_i18n, recorded_missing):
        for path, locale in orphan_keys(recording_i18n).items():
            recording_i18n.t(path, locale)
        assert len(recorded_missing) == 5


class TestCoverageSummary:
    def test_per_locale_totals(self, i18n):
        summary = coverage_summary(i18n)
        assert [row.locale for row in summary] == ["en", "id"]
        en, id_ = summary
        assert isinstance(en, LocaleCoverage)
        assert en.total_keys == 9
        assert en.translated_keys == 8
        assert en.missing_keys == 1
        assert en.coverage_pct == pytest.approx(88.9)
        assert id_.translated_keys == 5
        assert id_.coverage_pct == pytest.approx(55.6)

    def test_locale_without_leaves(self):
        store = I18n({"en": {}, "id": {}})
        summary = coverage_summary(store)
        assert all(row.total_keys == 0 for row in summary)
        assert all(row.coverage_pct == 100.0 for row in summary)
