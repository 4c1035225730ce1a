"""
src/pages/coverage.py
──────────────────────
Translation coverage page: per-locale completeness and missing keys.
"""
import dash_bootstrap_components as dbc
from dash import dcc, html

MUTED = "#8b949e"


def layout(locales: list[str], lang: str) -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Coverage", className="page-title"),
                    html.P("Translated leaf keys per locale", className="page-subtitle"),
                ],
                className="page-header",
            ),
            html.Div(id="coverage-kpis", className="mb-3"),
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Coverage by locale", className="chart-title"),
                                dcc.Graph(id="coverage-chart", config={"displayModeBar": False}),
                            ],
                            className="chart-card",
                        ),
                        md=7,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Missing keys", className="chart-title"),
                                dcc.Dropdown(
                                    id="coverage-locale",
                                    options=[{"label": code, "value": code} for code in locales],
                                    value=lang,
                                    clearable=False,
                                    className="dark-dropdown mb-2",
                                ),
                                html.Div(id="coverage-missing", style={"color": MUTED}),
                            ],
                            className="chart-card",
                        ),
                        md=5,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
