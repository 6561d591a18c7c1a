# PL/pagelinks/services/options.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/services/options.py
# Назначение: глобальные умолчания пагинации, слияние опций, проверка устаревших ключей
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations
import logging
import threading
from typing import Any, Dict, List, Optional, TypedDict

logger = logging.getLogger(__name__)


class PaginationOptions(TypedDict, total=False):
    inner_window: int         # ссылки вокруг текущей страницы
    outer_window: int         # ссылки у начала и конца
    page_links: bool          # False → только previous/next
    param_name: str           # GET-параметр с номером страницы
    params: Optional[Dict[str, Any]]  # доп. параметры для URL
    previous_label: Optional[str]
    next_label: Optional[str]
    container: bool           # оборачивать ли ссылки в контейнер
    link_separator: str       # разделитель между элементами
    renderer: Any             # имя рендерера из реестра, класс или экземпляр


DEFAULT_OPTIONS: Dict[str, Any] = {
    "class": "pagination",
    "previous_label": None,
    "next_label": None,
    "inner_window": 4,
    "outer_window": 1,
    "link_separator": " ",  # пробел удобен для поисковиков и текстовых браузеров
    "param_name": "page",
    "params": None,
    "page_links": True,
    "container": True,
    "renderer": "html",
}

# ключи, которые понимаем сами; всё остальное уходит атрибутами на контейнер
KNOWN_KEYS = frozenset(DEFAULT_OPTIONS) - {"class"}

DEPRECATED_KEYS: Dict[str, str] = {
    "previous_label": "задайте ключ 'pagelinks.previous_label' в переводах (PAGELINKS['TRANSLATIONS']) вместо глобальной опции",
    "next_label": "задайте ключ 'pagelinks.next_label' в переводах (PAGELINKS['TRANSLATIONS']) вместо глобальной опции",
    "renderer": "опцию 'renderer' не стоит задавать глобально, передавайте её в месте вызова",
}

_defaults: Dict[str, Any] = dict(DEFAULT_OPTIONS)
_lock = threading.Lock()
_warned: set = set()


def merge_options(defaults: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Поверхностное слияние: ключи из overrides побеждают, неизвестные ключи сохраняются."""
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)
    return merged


def validate_options(options: Dict[str, Any]) -> List[str]:
    """Список предупреждений про устаревшие ключи в глобальных умолчаниях."""
    warnings: List[str] = []
    for key, hint in DEPRECATED_KEYS.items():
        if key not in options:
            continue
        if key == "renderer":
            if options[key] == DEFAULT_OPTIONS["renderer"]:
                continue
        elif options[key] is None:
            continue
        warnings.append(f"PAGELINKS['OPTIONS'][{key!r}]: {hint}")
    return warnings


def get_defaults() -> Dict[str, Any]:
    """Копия текущих глобальных умолчаний (рендер их никогда не меняет)."""
    return dict(_defaults)


def configure(**overrides: Any) -> List[str]:
    """Административное обновление глобальных умолчаний (обычно один раз при старте).

    Возвращает предупреждения валидации; каждое пишется в лог только один раз за процесс.
    """
    warnings = validate_options(overrides)
    with _lock:
        _defaults.update(overrides)
        fresh = [w for w in warnings if w not in _warned]
        _warned.update(fresh)
    for message in fresh:
        logger.warning("Устаревшая настройка пагинации: %s", message)
    return warnings


def reset_defaults() -> None:
    with _lock:
        _defaults.clear()
        _defaults.update(DEFAULT_OPTIONS)


def container_attrs(options: Dict[str, Any]) -> Dict[str, Any]:
    """Атрибуты контейнера: class + всё, что мы не распознали."""
    attrs: Dict[str, Any] = {}
    for key, value in options.items():
        if key in KNOWN_KEYS or value is None or value is False:
            continue
        attrs[key] = value
    return attrs
