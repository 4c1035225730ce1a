"""
src/layout/navbar.py
─────────────────────
Navigation bar with page links.

Link labels are looked up in the loaded translations themselves, so the
explorer doubles as a smoke test of the document it is browsing.
"""

import dash_bootstrap_components as dbc
from dash import html

from src.i18n.translator import I18n

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"


def create_navbar(i18n: I18n, lang: str) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                dbc.NavbarBrand(
                    [
                        html.Span("文", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            "i18n Explorer", style={"fontWeight": "700", "letterSpacing": ".04em"}
                        ),
                    ],
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            dbc.NavItem(
                                dbc.NavLink(
                                    i18n.t("nav.lookup", lang, "Lookup"),
                                    href="/",
                                    id="nav-lookup",
                                    active="exact",
                                )
                            ),
                            dbc.NavItem(
                                dbc.NavLink(
                                    i18n.t("nav.coverage", lang, "Coverage"),
                                    href="/coverage",
                                    id="nav-coverage",
                                    active="exact",
                                )
                            ),
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
