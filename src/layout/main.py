"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing
  - Navbar + page content container
"""
from dash import dcc, html

from src.i18n.translator import I18n
from src.layout.navbar import create_navbar


def create_layout(i18n: I18n, lang: str) -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(i18n, lang),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("i18n Explorer"),
                    html.Span(" · "),
                    html.Span(f"{len(i18n.locales)} locales"),
                    html.Span(" · "),
                    html.Span(f"fallback: {i18n.fallback_locale}"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
