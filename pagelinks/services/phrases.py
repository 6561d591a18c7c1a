# PL/pagelinks/services/phrases.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/services/phrases.py
# Назначение: поиск локализованных фраз с плюрализацией и гарантированным фоллбеком
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations
import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from django.conf import settings
from django.utils import translation

from .locales import BUILTIN_TRANSLATIONS

logger = logging.getLogger(__name__)

NAMESPACE = "pagelinks"
PLURAL_KEYS = frozenset({"zero", "one", "few", "many", "other"})

Template = Union[str, Dict[str, str]]
Fallback = Callable[[Dict[str, Any]], str]


# --- Правила выбора плюральной формы ------------------------------------------

def _english_rule(count: int) -> str:
    return "one" if count == 1 else "other"


def _east_slavic_rule(count: int) -> str:
    """ru/uk: 1, 21 → one; 2-4, 22-24 → few; остальное → many."""
    n10, n100 = count % 10, count % 100
    if n10 == 1 and n100 != 11:
        return "one"
    if 2 <= n10 <= 4 and not 12 <= n100 <= 14:
        return "few"
    return "many"


PLURAL_RULES: Dict[str, Callable[[int], str]] = {
    "en": _english_rule,
    "ru": _east_slavic_rule,
    "uk": _east_slavic_rule,
}


def _flatten(tree: Mapping[str, Any], prefix: str = "") -> Dict[str, Template]:
    """{'a': {'b': 'x'}} → {'a.b': 'x'}; словарь только из плюральных ключей — это лист."""
    flat: Dict[str, Template] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value and not set(value) <= PLURAL_KEYS:
            flat.update(_flatten(value, path))
        elif isinstance(value, Mapping):
            flat[path] = dict(value)
        else:
            flat[path] = value
    return flat


class TranslationStore:
    """Таблица переводов: locale → {ключ.через.точку: шаблон}."""

    def __init__(self, catalogue: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._tables: Dict[str, Dict[str, Template]] = {}
        self._lock = threading.Lock()
        for locale, tree in (catalogue or {}).items():
            self.update(locale, tree)

    def update(self, locale: str, tree: Mapping[str, Any]) -> None:
        """Доливает переводы для локали (административная операция)."""
        flat = _flatten(tree)
        with self._lock:
            self._tables.setdefault(locale.lower(), {}).update(flat)

    def locales(self) -> List[str]:
        return sorted(self._tables)

    def lookup(self, key: str, locale: str) -> Optional[Template]:
        return self._tables.get(locale.lower(), {}).get(key)

    def bucket_for(self, count: int, locale: str) -> str:
        base = locale.lower().split("-")[0].split("_")[0]
        rule = PLURAL_RULES.get(base, _english_rule)
        return rule(abs(int(count)))


_store: Optional[TranslationStore] = None


def get_store() -> TranslationStore:
    """Глобальное хранилище: встроенный каталог + settings.PAGELINKS['TRANSLATIONS']."""
    global _store
    if _store is None:
        store = TranslationStore(BUILTIN_TRANSLATIONS)
        extra = getattr(settings, "PAGELINKS", {}).get("TRANSLATIONS") or {}
        for locale, tree in extra.items():
            store.update(locale, tree)
        _store = store
    return _store


def reset_store() -> None:
    """Сбросить кэш хранилища (перечитает настройки при следующем обращении)."""
    global _store
    _store = None


def _locale_candidates(locale: Optional[str]) -> List[str]:
    locale = (locale or translation.get_language() or settings.LANGUAGE_CODE).lower()
    base = locale.split("-")[0].split("_")[0]
    return [locale] if base == locale else [locale, base]


def _pick_form(template: Template, count: Any, store: TranslationStore, locale: str) -> Optional[str]:
    if not isinstance(template, Mapping):
        return template
    if count is None:
        return template.get("other")
    if count == 0 and "zero" in template:
        return template["zero"]
    bucket = store.bucket_for(count, locale)
    return template.get(bucket, template.get("other"))


def resolve(keys: Iterable[str], params: Dict[str, Any], fallback: Fallback, *,
            locale: Optional[str] = None, store: Optional[TranslationStore] = None) -> str:
    """Первый найденный перевод из keys, иначе fallback(params).

    Parameters
    ----------
    keys : Iterable[str]
        Ключи без префикса 'pagelinks.', в порядке приоритета.
    params : dict
        Подстановки для шаблона; 'count' выбирает плюральную форму.
    fallback : callable
        Английская фраза по умолчанию; не должна бросать исключений.
    """
    store = store or get_store()
    count = params.get("count")
    for loc in _locale_candidates(locale):
        for key in keys:
            template = store.lookup(f"{NAMESPACE}.{key}", loc)
            if template is None:
                continue
            form = _pick_form(template, count, store, loc)
            if form is None:
                continue
            try:
                return form % params
            except (KeyError, ValueError, TypeError) as e:
                # битый перевод не должен ронять рендер — уходим дальше по цепочке
                logger.warning("Bad translation %s [%s]: %r (%s)", key, loc, form, e)
    return fallback(params)
