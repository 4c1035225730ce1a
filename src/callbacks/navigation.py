"""
src/callbacks/navigation.py: Page routing and navbar callbacks.
"""
from __future__ import annotations

from dash import Input, Output, State

from src.i18n.translator import I18n


def register(app, i18n: I18n, lang: str) -> None:
    """Register routing + navbar callbacks."""
    from src.pages import coverage, lookup

    locales = list(i18n.locales)

    # ── Page routing ──────────────────────────────────────────────────────────
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def display_page(pathname: str):
        routes = {
            "/": lookup.layout,
            "/coverage": coverage.layout,
        }
        return routes.get(pathname, lookup.layout)(locales, lang)

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open
