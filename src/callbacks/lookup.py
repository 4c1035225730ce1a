"""
src/callbacks/lookup.py
────────────────────────
Lookup page callbacks.
"""
from __future__ import annotations

import json
from typing import Any

import dash_bootstrap_components as dbc
from dash import Input, Output, html

from src.i18n.models import ResolutionSource
from src.i18n.translator import MISSING_CONTENT, I18n
from src.layout.components.kpi_card import kpi_card

MUTED = "#8b949e"

SOURCE_COLORS = {
    ResolutionSource.PRIMARY: "#2ea44f",
    ResolutionSource.FALLBACK: "#e8a020",
    ResolutionSource.DEFAULT: "#da3633",
}


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def describe_lookup(i18n: I18n, path: str, locale: str, default: str | None = None) -> dict:
    """
    Resolve ``path`` for display.

    Returns a dict with the formatted ``value``, the winning ``source``, its
    ``color`` and whether another locale backs the path up (``available_elsewhere``).
    """
    trace = i18n.explain(path, locale)
    if trace.source is ResolutionSource.DEFAULT:
        value = default or MISSING_CONTENT
    else:
        value = _format_value(trace.value)
    return {
        "value": value,
        "source": trace.source.value,
        "color": SOURCE_COLORS[trace.source],
        "available_elsewhere": trace.available_elsewhere,
    }


def register(app, i18n: I18n) -> None:

    @app.callback(
        Output("lookup-result", "children"),
        Input("lookup-path", "value"),
        Input("lookup-locale", "value"),
        Input("lookup-default", "value"),
    )
    def update_lookup(path: str | None, locale: str, default: str | None):
        if not path:
            return html.Div("Enter a dot-separated path, e.g. user.greeting", style={"color": MUTED})

        result = describe_lookup(i18n, path, locale, default)
        children = [
            dbc.Row(
                [
                    dbc.Col(kpi_card("Value", result["value"], color=result["color"]), md=8),
                    dbc.Col(
                        kpi_card(
                            "Source",
                            result["source"],
                            color=result["color"],
                            sub_label=f"fallback locale: {i18n.fallback_locale}",
                            border_color=result["color"],
                        ),
                        md=4,
                    ),
                ],
                className="g-3",
            )
        ]
        if not result["available_elsewhere"]:
            children.append(
                dbc.Alert(
                    f"'{path}' is not available in any locale except '{locale}'.",
                    color="warning",
                    className="mt-3",
                )
            )
        return html.Div(children)
