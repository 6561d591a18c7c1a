# PL/pagelinks/services/collection.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class PageCollection:
    """Срез упорядоченной коллекции: одна страница + общие счётчики.

    Только читаем. Откуда взялись цифры (ORM, API, список) — не наше дело.
    """
    total_pages: int
    current_page: int
    total_entries: int
    per_page: int
    offset: int = 0
    length: int = 0
    items: Sequence[Any] = field(default=(), repr=False)
    model: Any = None

    @property
    def previous_page(self) -> Optional[int]:
        return self.current_page - 1 if self.current_page > 1 else None

    @property
    def next_page(self) -> Optional[int]:
        return self.current_page + 1 if self.current_page < self.total_pages else None

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def first(self) -> Any:
        return self.items[0] if self.items else None

    @classmethod
    def from_list(cls, items: Sequence[Any], page: int = 1, per_page: int = 20, *, model: Any = None) -> "PageCollection":
        """Собирает страницу из обычного списка (удобно для тестов и демо)."""
        per_page = max(1, per_page)
        total_entries = len(items)
        total_pages = (total_entries + per_page - 1) // per_page
        offset = (page - 1) * per_page
        chunk = list(items[offset:offset + per_page])
        return cls(total_pages=total_pages, current_page=page, total_entries=total_entries,
                   per_page=per_page, offset=offset, length=len(chunk), items=chunk, model=model)


def from_page(page_obj, *, model: Any = None) -> PageCollection:
    """Адаптер для django.core.paginator.Page."""
    paginator = page_obj.paginator
    items = list(page_obj.object_list)
    if model is None:
        # у QuerySet есть .model, у списков — нет
        model = getattr(paginator.object_list, "model", None)
    offset = page_obj.start_index() - 1 if items else (page_obj.number - 1) * paginator.per_page
    return PageCollection(
        total_pages=paginator.num_pages if paginator.count else 0,
        current_page=page_obj.number,
        total_entries=paginator.count,
        per_page=paginator.per_page,
        offset=offset,
        length=len(items),
        items=items,
        model=model,
    )


def as_collection(obj) -> PageCollection:
    """PageCollection как есть, Page — через адаптер."""
    if isinstance(obj, PageCollection):
        return obj
    if hasattr(obj, "paginator") and hasattr(obj, "number"):
        return from_page(obj)
    raise TypeError(f"Не умею пагинировать объект типа {type(obj).__name__}")
