# PL/pagelinks/services/naming.py
from __future__ import annotations
import inspect
import re
from typing import Any, Optional, Protocol, runtime_checkable

from ..exceptions import PaginationConfigError

DEFAULT_MODEL = "entry"


@runtime_checkable
class HasDisplayName(Protocol):
    """Модель сама сообщает ключ для переводов (models.<key>, <key>.page_entries_info…).

    Обычный метод экземпляра: вызывается на первом элементе страницы.
    Если модель передают классом (model=..., collection.model), метод должен быть classmethod.
    """

    def naming_key(self) -> str: ...


@runtime_checkable
class HasLocalizedPluralName(Protocol):
    """Модель сама отдаёт человекочитаемое имя в нужном числе. Правила вызова — как у HasDisplayName."""

    def plural_name(self, count: int) -> str: ...


def underscore(name: str) -> str:
    """'BlogPost' → 'blog_post'."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower()


_ES_ENDINGS = ("s", "x", "z", "ch", "sh")


def pluralize(word: str) -> str:
    """Наивная английская плюрализация последнего слова. Непонятное → PaginationConfigError."""
    if not word or not word[-1:].isalpha():
        raise PaginationConfigError(f"can't pluralize model name: {word!r}")
    lower = word.lower()
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(_ES_ENDINGS):
        return word + "es"
    return word + "s"


def _django_meta(model: Any):
    meta = getattr(model, "_meta", None)
    if meta is not None and hasattr(meta, "model_name") and hasattr(meta, "verbose_name"):
        return meta
    return None


def _capability(model: Any, protocol: type, name: str):
    """Связанный метод возможности или None.

    У класса метод экземпляра не связан — такой класс идёт по общему пути.
    """
    if not isinstance(model, protocol):
        return None
    method = getattr(model, name)
    if isinstance(model, type) and not inspect.ismethod(method):
        return None
    return method


def model_key(model: Any) -> str:
    naming_key = _capability(model, HasDisplayName, "naming_key")
    if naming_key is not None:
        return naming_key()
    meta = _django_meta(model)
    if meta is not None:
        return meta.model_name
    if isinstance(model, str):
        return underscore(model)
    cls = model if isinstance(model, type) else type(model)
    return underscore(cls.__name__)


def human_name(model: Any, count: Optional[int]) -> str:
    """Имя модели для фразы, когда в переводах нет models.<key>."""
    plural_name = _capability(model, HasLocalizedPluralName, "plural_name")
    if plural_name is not None:
        return plural_name(count)
    meta = _django_meta(model)
    if meta is not None:
        return str(meta.verbose_name if count == 1 else meta.verbose_name_plural)
    name = model_key(model).replace("_", " ")
    return name if count == 1 else pluralize(name)


def infer_model(collection, explicit: Any = None) -> Any:
    """Явная модель → модель коллекции → первый элемент (если умеет называть себя) или его класс → 'entry'."""
    if explicit is not None:
        return explicit
    if collection.model is not None:
        return collection.model
    first = collection.first()
    if first is None:
        return DEFAULT_MODEL
    if isinstance(first, (HasDisplayName, HasLocalizedPluralName)):
        return first
    return type(first)
