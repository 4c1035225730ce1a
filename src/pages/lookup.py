"""
src/pages/lookup.py
────────────────────
Interactive lookup page: resolve a path in a chosen locale.

Static structure; the result card is injected via callbacks.
"""
import dash_bootstrap_components as dbc
from dash import dcc, html

MUTED = "#8b949e"
_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}


def layout(locales: list[str], lang: str) -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Lookup", className="page-title"),
                    html.P(
                        "Requested locale → fallback locale → default",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),

            # ── Controls ───────────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.Label("Locale", style=_LABEL_STYLE),
                            dcc.Dropdown(
                                id="lookup-locale",
                                options=[{"label": code, "value": code} for code in locales],
                                value=lang,
                                clearable=False,
                                className="dark-dropdown",
                            ),
                        ],
                        md=2,
                    ),
                    dbc.Col(
                        [
                            html.Label("Path", style=_LABEL_STYLE),
                            dbc.Input(id="lookup-path", type="text", placeholder="user.greeting", debounce=True),
                        ],
                        md=6,
                    ),
                    dbc.Col(
                        [
                            html.Label("Default", style=_LABEL_STYLE),
                            dbc.Input(id="lookup-default", type="text", placeholder="Content not found", debounce=True),
                        ],
                        md=4,
                    ),
                ],
                className="g-3 mb-4",
            ),

            # ── Result (dynamic) ──────────────────────────────────────────────
            html.Div(id="lookup-result"),
        ],
        style={"padding": "1.5rem"},
    )
