# PL/pagelinks/services/entries_info.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/services/entries_info.py
# Назначение: строка «Displaying entries 6 - 12 of 26 in total» с учётом локали
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations
from typing import Any, Dict, Optional

from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from .collection import as_collection
from .naming import human_name, infer_model, model_key
from .phrases import TranslationStore, resolve

# на многостраничной коллекции имя модели всегда во «множественном» числе
MULTI_PAGE_PROBE_COUNT = 5


def page_entries_info(collection, *, model: Any = None, html: bool = True,
                      locale: Optional[str] = None, store: Optional[TranslationStore] = None) -> str:
    """Сколько записей показано и сколько всего.

    html=True — числа в <b>, неразрывные пробелы, ключи с суффиксом _html,
    результат SafeString. html=False — обычный текст.
    """
    collection = as_collection(collection)
    model = infer_model(collection, model)
    key = model_key(model)

    if html:
        b, eb, sp, html_key = "<b>", "</b>", "&nbsp;", "_html"
    else:
        b = eb = html_key = ""
        sp = " "

    model_count = MULTI_PAGE_PROBE_COUNT if collection.total_pages > 1 else collection.length

    def model_fallback(opts: Dict[str, Any]) -> str:
        name = human_name(model, opts["count"])
        # имя из переводов считается готовой разметкой (как подписи ссылок), экранируем только своё
        return conditional_escape(name) if html else name

    model_name = resolve([f"models.{key}"], {"count": model_count}, model_fallback, locale=locale, store=store)

    if collection.total_pages < 2:
        i18n_key = f"page_entries_info.single_page{html_key}"
        params: Dict[str, Any] = {"count": collection.total_entries, "model": model_name}

        def fallback(opts: Dict[str, Any]) -> str:
            if opts["count"] == 0:
                return f"No {opts['model']} found"
            if opts["count"] == 1:
                return f"Displaying {b}1{eb} {opts['model']}"
            return f"Displaying {b}all{sp}{opts['count']}{eb} {opts['model']}"
    else:
        i18n_key = f"page_entries_info.multi_page{html_key}"
        params = {
            "model": model_name,
            "count": collection.total_entries,
            "from": collection.offset + 1,
            "to": collection.offset + collection.length,
        }

        def fallback(opts: Dict[str, Any]) -> str:
            return "Displaying %s %s%d%s-%s%d%s of %s%d%s in total" % (
                opts["model"], b, opts["from"], sp, sp, opts["to"], eb, b, opts["count"], eb,
            )

    text = resolve([f"{key}.{i18n_key}", i18n_key], params, fallback, locale=locale, store=store)
    return mark_safe(text) if html else text
