# PL/pagelinks/services/pagination.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

PAGE = "page"
GAP = "gap"
PREVIOUS = "previous"
NEXT = "next"


@dataclass(frozen=True)
class LinkEntry:
    """Один элемент блока пагинации.

    kind=page     — номер страницы (current=True у текущей);
    kind=gap      — пропуск между номерами;
    kind=previous/next — соседние страницы, number=None и disabled=True если соседа нет.
    """
    kind: str
    number: Optional[int] = None
    current: bool = False
    disabled: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _clip(start: int, end: int, total: int) -> range:
    return range(max(1, start), min(total, end) + 1)


def compute_window(current: int, total: int, inner_window: int = 4, outer_window: int = 1) -> List[LinkEntry]:
    """Возвращает номера страниц вокруг текущей и по краям, с пропусками.

    Parameters
    ----------
    current : int
        Текущий номер страницы (1-based).
    total : int
        Общее число страниц.
    inner_window : int, optional
        Сколько страниц показывать по обе стороны от текущей, по умолчанию 4.
    outer_window : int, optional
        Сколько страниц показывать у начала и у конца, по умолчанию 1.

    Returns
    -------
    List[LinkEntry]
        Страницы по возрастанию; между несмежными номерами ровно один gap.
    """
    if total <= 1:
        return []
    inner_window = max(0, inner_window)
    outer_window = max(0, outer_window)

    pages = set(_clip(current - inner_window, current + inner_window, total))
    pages.update(_clip(1, outer_window, total))
    pages.update(_clip(total - outer_window + 1, total, total))

    entries: List[LinkEntry] = []
    prev = None
    for number in sorted(pages):
        # пропуск даже в одну страницу рисуем как gap, а не номером
        if prev is not None and number - prev > 1:
            entries.append(LinkEntry(GAP))
        entries.append(LinkEntry(PAGE, number, current=(number == current)))
        prev = number
    return entries


def previous_entry(current: int, total: int) -> LinkEntry:
    # за последней страницей «назад» ведёт на последнюю существующую
    if current > 1 and total >= 1:
        return LinkEntry(PREVIOUS, min(current - 1, total))
    return LinkEntry(PREVIOUS, None, disabled=True)


def next_entry(current: int, total: int) -> LinkEntry:
    if current < total:
        return LinkEntry(NEXT, current + 1)
    return LinkEntry(NEXT, None, disabled=True)


def navigation_entries(current: int, total: int, *, inner_window: int = 4, outer_window: int = 1,
                       page_links: bool = True) -> List[LinkEntry]:
    """Полная последовательность: previous + окно страниц + next.

    При total <= 1 рисовать нечего — пустой список.
    """
    if total <= 1:
        return []
    middle = compute_window(current, total, inner_window, outer_window) if page_links else []
    return [previous_entry(current, total), *middle, next_entry(current, total)]
