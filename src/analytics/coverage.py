"""
src/analytics/coverage.py
──────────────────────────
Translation coverage audit.

Provides:
  - iter_leaf_paths()   : Dot paths of every leaf in a locale tree
  - coverage_frame()    : Path × locale boolean matrix of translated content
  - missing_keys()      : Paths a locale lacks but another locale has
  - orphan_keys()       : Paths only one locale translates
  - coverage_summary()  : Per-locale totals as LocaleCoverage models

A path counts as translated in a locale when it resolves to a non-null value,
the same test lookups use before falling back.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

import pandas as pd

from src.i18n.models import LocaleCoverage
from src.i18n.translator import I18n, has_content, resolve_path


def iter_leaf_paths(tree: Any, prefix: str = "") -> Iterator[str]:
    """
    Yield the dot path of every leaf under ``tree``.

    Scalars, ``None`` and sequences are leaves. Empty mappings yield nothing.
    """
    if not isinstance(tree, Mapping):
        if prefix:
            yield prefix
        return
    for key, value in tree.items():
        yield from iter_leaf_paths(value, f"{prefix}.{key}" if prefix else str(key))


def coverage_frame(store: I18n) -> pd.DataFrame:
    """Boolean DataFrame: index = leaf paths across all locales, columns = locales."""
    document = store.document
    paths = sorted({path for locale in store.locales for path in iter_leaf_paths(document[locale])})
    data = {
        locale: [has_content(resolve_path(document[locale], path)) for path in paths]
        for locale in store.locales
    }
    return pd.DataFrame(
        data,
        index=pd.Index(paths, name="path", dtype=object),
        columns=list(store.locales),
        dtype=bool,
    )


def missing_keys(store: I18n, locale: str) -> list[str]:
    """Sorted paths that some other locale translates but ``locale`` does not."""
    if not store.has_locale(locale):
        raise KeyError(locale)
    frame = coverage_frame(store)
    if frame.empty:
        return []
    others = frame.drop(columns=[locale])
    if others.empty:
        return []
    mask = others.any(axis=1) & ~frame[locale]
    return sorted(frame.index[mask.to_numpy()])


def orphan_keys(store: I18n) -> pd.Series:
    """
    Paths translated by exactly one locale, mapped to that locale.

    Looking up an orphan key in its own locale triggers the missing-content
    warning, since no other locale can back it up.
    """
    frame = coverage_frame(store)
    single = frame[frame.sum(axis=1) == 1]
    if single.empty:
        return pd.Series(dtype=object, name="locale", index=pd.Index([], name="path", dtype=object))
    return single.astype(int).idxmax(axis=1).rename("locale")


def coverage_summary(store: I18n) -> list[LocaleCoverage]:
    """Per-locale coverage against the union of all leaf paths."""
    frame = coverage_frame(store)
    total = len(frame.index)
    summary: list[LocaleCoverage] = []
    for locale in store.locales:
        translated = int(frame[locale].sum()) if total else 0
        summary.append(
            LocaleCoverage(
                locale=locale,
                total_keys=total,
                translated_keys=translated,
                missing_keys=total - translated,
                coverage_pct=round(100.0 * translated / total, 1) if total else 100.0,
            )
        )
    return summary
