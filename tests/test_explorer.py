"""
tests/test_explorer.py
───────────────────────
Tests for the explorer's callback helpers (no Dash server needed).
"""
import plotly.graph_objects as go

from src.analytics.coverage import coverage_summary
from src.callbacks.coverage import coverage_figure
from src.callbacks.lookup import SOURCE_COLORS, describe_lookup
from src.i18n.models import ResolutionSource


class TestDescribeLookup:
    def test_primary_value(self, i18n):
        result = describe_lookup(i18n, "greeting", "id")
        assert result["value"] == "Halo"
        assert result["source"] == "primary"
        assert result["color"] == SOURCE_COLORS[ResolutionSource.PRIMARY]

    def test_fallback_value(self, i18n):
        result = describe_lookup(i18n, "cart.items", "id")
        assert result["value"] == "3"
        assert result["source"] == "fallback"

    def test_default_uses_sentinel(self, i18n):
        result = describe_lookup(i18n, "nope", "en")
        assert result["value"] == "Content not found"
        assert result["source"] == "default"
        assert result["available_elsewhere"] is False

    def test_default_uses_caller_text(self, i18n):
        assert describe_lookup(i18n, "nope", "en", "n/a")["value"] == "n/a"

    def test_containers_rendered_as_json(self, i18n):
        assert describe_lookup(i18n, "weekdays", "id")["value"] == '["Senin", "Selasa"]'


class TestCoverageFigure:
    def test_one_bar_per_locale(self, i18n):
        fig = coverage_figure(coverage_summary(i18n))
        assert isinstance(fig, go.Figure)
        bar = fig.data[0]
        assert list(bar.y) == ["en", "id"]
        assert list(bar.text) == ["8/9", "5/9"]
