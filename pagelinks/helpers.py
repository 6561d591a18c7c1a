# PL/pagelinks/helpers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/helpers.py
# Назначение: точки входа для шаблонов и представлений — ссылки пагинации и <link rel>
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .renderers import get_renderer
from .services.collection import as_collection
from .services.options import PaginationOptions, get_defaults, merge_options
from .services.phrases import resolve
from .services.urls import build_page_url

logger = logging.getLogger(__name__)

DEFAULT_PREVIOUS_LABEL = "&#8592; Previous"
DEFAULT_NEXT_LABEL = "Next &#8594;"


def will_paginate(collection, options: Optional[PaginationOptions] = None, context: Any = None) -> Optional[SafeString]:
    """HTML со ссылками пагинации. Если страница всего одна — None.

    Все нераспознанные опции становятся атрибутами контейнера:
    will_paginate(page, {"style": "color:blue"}) → <div class="pagination" style="color:blue">…
    """
    collection = as_collection(collection)
    if collection.total_pages <= 1:
        return None

    options = merge_options(get_defaults(), options)
    if not options.get("previous_label"):
        options["previous_label"] = resolve(["previous_label"], {}, lambda _: DEFAULT_PREVIOUS_LABEL)
    if not options.get("next_label"):
        options["next_label"] = resolve(["next_label"], {}, lambda _: DEFAULT_NEXT_LABEL)

    renderer = get_renderer(options.get("renderer"))
    renderer.prepare(collection, options, context)
    logger.debug("Render pagination page=%s/%s renderer=%s",
                 collection.current_page, collection.total_pages, type(renderer).__name__)
    return mark_safe(renderer.to_html())


def pagination_link_tags(collection, request=None, params: Optional[Dict[str, Any]] = None,
                         url_builder: Optional[Callable[[int], str]] = None,
                         param_name: str = "page") -> SafeString:
    """<link rel="prev"/"next"> для <head>. Адреса абсолютные."""
    collection = as_collection(collection)
    if url_builder is None:
        def url_builder(page: int) -> str:
            return build_page_url(request, page, param_name, params, absolute=True)

    output = []
    if collection.previous_page:
        output.append(format_html('<link rel="{}" href="{}" />', "prev", url_builder(collection.previous_page)))
    if collection.next_page:
        output.append(format_html('<link rel="{}" href="{}" />', "next", url_builder(collection.next_page)))
    return mark_safe("\n".join(output))
