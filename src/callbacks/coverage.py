"""
src/callbacks/coverage.py
──────────────────────────
Coverage page callbacks.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Input, Output, html

from src.analytics.coverage import coverage_summary, missing_keys, orphan_keys
from src.i18n.models import LocaleCoverage
from src.i18n.translator import I18n
from src.layout.components.kpi_card import kpi_card

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"


def _coverage_color(pct: float) -> str:
    if pct >= 90.0:
        return "#2ea44f"
    if pct >= 60.0:
        return "#e8a020"
    return "#da3633"


def coverage_figure(summary: list[LocaleCoverage], fallback_locale: str = "en") -> go.Figure:
    """Horizontal bar chart of coverage % per locale."""
    fig = go.Figure(
        go.Bar(
            x=[row.coverage_pct for row in summary],
            y=[row.locale for row in summary],
            orientation="h",
            marker_color=[_coverage_color(row.coverage_pct) for row in summary],
            text=[f"{row.translated_keys}/{row.total_keys}" for row in summary],
            textposition="auto",
            hovertemplate="%{y}: %{x:.1f}%<extra></extra>",
        )
    )
    fig.update_layout(
        template=PLOTLY_TMPL,
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        font={"color": "#c9d1d9", "size": 11},
        xaxis={"gridcolor": GRID_CLR, "range": [0, 100], "ticksuffix": "%"},
        yaxis={"gridcolor": GRID_CLR, "autorange": "reversed"},
        height=max(180, 60 * len(summary)),
        showlegend=False,
    )
    fig.add_vline(x=100, line_dash="dot", line_color=MUTED, annotation_text=f"fallback: {fallback_locale}")
    return fig


def register(app, i18n: I18n) -> None:
    summary = coverage_summary(i18n)
    orphans = orphan_keys(i18n)

    @app.callback(
        Output("coverage-kpis", "children"),
        Output("coverage-chart", "figure"),
        Input("url", "pathname"),
    )
    def update_overview(pathname: str):
        total = summary[0].total_keys if summary else 0
        kpis = dbc.Row(
            [
                dbc.Col(kpi_card("Locales", str(len(i18n.locales))), md=4),
                dbc.Col(kpi_card("Leaf keys", str(total)), md=4),
                dbc.Col(
                    kpi_card(
                        "Single-locale keys",
                        str(len(orphans)),
                        color="#e8a020" if len(orphans) else "#2ea44f",
                        sub_label="no other locale backs these up",
                    ),
                    md=4,
                ),
            ],
            className="g-3",
        )
        return kpis, coverage_figure(summary, i18n.fallback_locale)

    @app.callback(
        Output("coverage-missing", "children"),
        Input("coverage-locale", "value"),
    )
    def update_missing(locale: str):
        keys = missing_keys(i18n, locale)
        if not keys:
            return html.Div("Nothing missing", style={"color": "#2ea44f"})
        return html.Ul(
            [html.Li(html.Code(key)) for key in keys],
            style={"fontSize": ".8rem", "maxHeight": "360px", "overflowY": "auto"},
        )
