"""
src/i18n/translator.py
───────────────────────
Translation store backed by a single JSON document keyed by locale.

Usage:
    from src.i18n.translator import I18n

    i18n = I18n({"en": {"greeting": "Hello"}, "id": {"greeting": "Halo"}})
    i18n.t("greeting", "id")           # → "Halo"
    i18n.t("greeting", "fr")           # → "Hello" (falls back to "en")
    i18n.t("missing.key")              # → "Content not found"
    i18n.get("count", "en", 0)         # → converted to int, or 0

Lookup order: requested locale → fallback locale ("en") → caller default.
"""
from __future__ import annotations

import copy
import json
import logging
import os
from collections.abc import Callable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.i18n.errors import DocumentParseError, DocumentReadError, InvalidDocumentError
from src.i18n.models import LookupTrace, ResolutionSource, TranslationDocument

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"
MISSING_CONTENT = "Content not found"

MissingHook = Callable[[str, str], None]


class _Missing:
    """Marker for a path that does not resolve (distinct from a found ``None``)."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
_UNSET: Any = object()


# ── Path resolution ───────────────────────────────────────────────────────────

def _split_path(path: str) -> list[str]:
    # "" has no segments and a single trailing dot adds none.
    if not path:
        return []
    segments = path.split(".")
    if segments[-1] == "":
        segments.pop()
    return segments


def resolve_path(tree: Any, path: str) -> Any:
    """
    Walk a dot-separated path through nested mappings.

    Sequences are leaves and are never indexed into.

    Returns:
        The node at ``path``, or ``MISSING`` when any segment is absent or
        the walk reaches a non-mapping before the path is exhausted.
    """
    node = tree
    for segment in _split_path(path):
        if not isinstance(node, Mapping) or segment not in node:
            return MISSING
        node = node[segment]
    return node


def has_content(node: Any) -> bool:
    """True for a resolved, non-null node."""
    return node is not MISSING and node is not None


@lru_cache(maxsize=64)
def _adapter(as_type: Any) -> TypeAdapter:
    return TypeAdapter(as_type)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def _to_number(node: Any, target: type) -> Any:
    """Cast any JSON number or bool to int/float; ints truncate toward zero."""
    if not isinstance(node, (int, float)):
        raise TypeError(f"expected a number, got {type(node).__name__}")
    return target(node)


def _log_missing(path: str, locale: str) -> None:
    logger.warning(
        "Content for path '%s' is not available in any locale except '%s'.", path, locale
    )


# ── Store ─────────────────────────────────────────────────────────────────────

class I18n:
    """
    Read-only translation store.

    The document is deep-copied at construction and never mutated afterwards;
    container values returned by lookups are copies. Lookups only read plain
    dicts, so one instance can be shared between threads. A custom
    ``on_missing`` hook is called synchronously and must be thread-safe itself
    when the store is shared.

    Args:
        document: Mapping of locale code → nested translation tree.
        fallback_locale: Locale consulted when the requested one has no value.
        on_missing: Called as ``hook(path, locale)`` when no locale other than
            the requested one has content at ``path``. Defaults to a logging
            warning.
    """

    def __init__(
        self,
        document: Mapping[str, Any],
        fallback_locale: str = FALLBACK_LOCALE,
        on_missing: MissingHook | None = None,
    ) -> None:
        if not isinstance(document, Mapping):
            raise InvalidDocumentError(
                f"Translation document must be an object, got {type(document).__name__}"
            )
        if not document:
            raise InvalidDocumentError("Translation document is empty")
        try:
            validated = TranslationDocument.model_validate(dict(document), strict=True)
        except ValidationError as exc:
            raise InvalidDocumentError(f"Translation document keys must be locale codes: {exc}") from exc

        self._translations: dict[str, Any] = copy.deepcopy(validated.root)
        self._locales: tuple[str, ...] = tuple(self._translations)
        self._fallback_locale = fallback_locale
        self._on_missing: MissingHook = on_missing or _log_missing
        logger.debug("Loaded translations for %d locale(s): %s", len(self._locales), ", ".join(self._locales))

    @classmethod
    def from_document(
        cls,
        document: Mapping[str, Any],
        fallback_locale: str = FALLBACK_LOCALE,
        on_missing: MissingHook | None = None,
    ) -> I18n:
        return cls(document, fallback_locale=fallback_locale, on_missing=on_missing)

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike,
        fallback_locale: str = FALLBACK_LOCALE,
        on_missing: MissingHook | None = None,
    ) -> I18n:
        """
        Load a JSON translation file.

        Raises:
            DocumentReadError: file cannot be opened or is zero bytes.
            DocumentParseError: content is not valid JSON.
            InvalidDocumentError: parsed value is not a non-empty object.
        """
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as exc:
            raise DocumentReadError(f"Could not open file: {os.fspath(path)}") from exc

        if not raw:
            raise DocumentReadError(f"File is empty: {os.fspath(path)}")

        try:
            document = json.loads(raw.decode("utf-8-sig"), parse_constant=_reject_constant)
        except (UnicodeDecodeError, ValueError) as exc:
            raise DocumentParseError(f"Invalid JSON in file: {os.fspath(path)}\n{exc}") from exc

        logger.debug("Read translation file %s (%d bytes)", os.fspath(path), len(raw))
        return cls(document, fallback_locale=fallback_locale, on_missing=on_missing)

    # ── Accessors ─────────────────────────────────────────────────────────────

    @property
    def locales(self) -> tuple[str, ...]:
        return self._locales

    @property
    def fallback_locale(self) -> str:
        return self._fallback_locale

    @property
    def document(self) -> Mapping[str, Any]:
        """Read-only view of the top level. Nested trees must not be modified."""
        return MappingProxyType(self._translations)

    def has_locale(self, locale: str) -> bool:
        return locale in self._translations

    def available_in_other_locales(self, path: str, locale: str) -> bool:
        """True if any locale other than ``locale`` has non-null content at ``path``."""
        return any(
            has_content(resolve_path(self._translations[other], path))
            for other in self._locales
            if other != locale
        )

    # ── Lookup ────────────────────────────────────────────────────────────────

    def _select(self, path: str, locale: str) -> tuple[ResolutionSource, Any]:
        primary = MISSING
        if locale in self._translations:
            primary = resolve_path(self._translations[locale], path)
        if has_content(primary):
            return ResolutionSource.PRIMARY, primary

        fallback = MISSING
        if locale != self._fallback_locale and self._fallback_locale in self._translations:
            fallback = resolve_path(self._translations[self._fallback_locale], path)
        if has_content(fallback):
            return ResolutionSource.FALLBACK, fallback

        return ResolutionSource.DEFAULT, MISSING

    def get(self, path: str, locale: str, default: Any, as_type: Any = None) -> Any:
        """
        Resolve ``path`` for ``locale`` and convert it to the output type.

        The output type is ``as_type`` when given, otherwise ``type(default)``;
        with neither, the raw node is returned. Missing content and failed
        conversions both yield ``default``.
        """
        if not self.available_in_other_locales(path, locale):
            self._on_missing(path, locale)

        source, node = self._select(path, locale)
        if source is ResolutionSource.DEFAULT:
            return default

        target = as_type if as_type is not None else (type(default) if default is not None else None)
        if target is None:
            return copy.deepcopy(node)
        try:
            if target in (int, float):
                return _to_number(node, target)
            return _adapter(target).validate_python(copy.deepcopy(node), strict=True)
        except (ValidationError, TypeError, ValueError, OverflowError) as exc:
            logger.debug("Could not convert '%s' (%s) to %r: %s", path, locale, target, exc)
            return default

    def t(self, path: str, locale: str = FALLBACK_LOCALE, default: Any = _UNSET, as_type: Any = None) -> Any:
        """
        Translate ``path``; shorthand for :meth:`get`.

        The output type is ``as_type``, else the type of ``default``, else
        ``str``. For string results an unset or empty default becomes
        ``"Content not found"``.
        """
        if as_type is None and (default is _UNSET or isinstance(default, str)):
            as_type = str
        if default is _UNSET:
            default = MISSING_CONTENT if as_type is str else None
        elif as_type is str and default == "":
            default = MISSING_CONTENT
        return self.get(path, locale, default, as_type=as_type)

    def explain(self, path: str, locale: str) -> LookupTrace:
        """Report which source a lookup would use, without converting or warning."""
        source, node = self._select(path, locale)
        return LookupTrace(
            path=path,
            locale=locale,
            fallback_locale=self._fallback_locale,
            source=source,
            value=None if node is MISSING else copy.deepcopy(node),
            available_elsewhere=self.available_in_other_locales(path, locale),
        )

    def __repr__(self) -> str:
        return f"I18n(locales={list(self._locales)!r}, fallback_locale={self._fallback_locale!r})"
