# PL/pagelinks/renderers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/renderers.py
# Назначение: превращение последовательности LinkEntry в HTML + реестр рендереров
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .exceptions import PaginationConfigError
from .services.collection import PageCollection
from .services.options import container_attrs
from .services.pagination import GAP, NEXT, PAGE, PREVIOUS, LinkEntry, navigation_entries
from .services.phrases import resolve
from .services.urls import build_page_url


class LinkRenderer:
    """Классическая разметка: <div class="pagination"> со ссылками, <em> для текущей."""

    container_tag = "div"

    def prepare(self, collection: PageCollection, options: Dict[str, Any], context: Any = None) -> None:
        self.collection = collection
        self.options = options
        self.context = context
        self.request = _request_from(context)

    # --- Последовательность элементов -----------------------------------------

    def entries(self) -> List[LinkEntry]:
        return navigation_entries(
            self.collection.current_page,
            self.collection.total_pages,
            inner_window=int(self.options["inner_window"]),
            outer_window=int(self.options["outer_window"]),
            page_links=bool(self.options["page_links"]),
        )

    def url(self, page: int) -> str:
        return build_page_url(self.request, page, str(self.options["param_name"]), self.options.get("params"))

    # --- Разметка отдельных элементов ------------------------------------------

    def page_number(self, entry: LinkEntry) -> SafeString:
        if entry.current:
            return format_html('<em class="current" aria-current="page">{}</em>', entry.number)
        rel = {1: "start"}.get(entry.number)
        if entry.number == self.collection.previous_page:
            rel = "prev"
        elif entry.number == self.collection.next_page:
            rel = "next"
        return format_html('<a{} href="{}">{}</a>', flatatt({"rel": rel}), self.url(entry.number), entry.number)

    def gap(self) -> SafeString:
        text = resolve(["page_gap"], {}, lambda _: "&hellip;")
        return format_html('<span class="gap">{}</span>', mark_safe(text))

    def previous_or_next(self, entry: LinkEntry) -> SafeString:
        css = "previous_page" if entry.kind == PREVIOUS else "next_page"
        label = mark_safe(self.options[f"{entry.kind}_label"])
        if entry.disabled:
            return format_html('<span class="{} disabled">{}</span>', css, label)
        rel = "prev" if entry.kind == PREVIOUS else "next"
        return format_html('<a class="{}" rel="{}" href="{}">{}</a>', css, rel, self.url(entry.number), label)

    def item(self, entry: LinkEntry) -> SafeString:
        if entry.kind == PAGE:
            return self.page_number(entry)
        if entry.kind == GAP:
            return self.gap()
        return self.previous_or_next(entry)

    # --- Сборка целиком --------------------------------------------------------

    def container(self, html: SafeString) -> SafeString:
        if not self.options.get("container", True):
            return html
        return format_html("<{tag}{attrs}>{body}</{tag}>",
                           tag=self.container_tag, attrs=flatatt(container_attrs(self.options)), body=html)

    def to_html(self) -> SafeString:
        separator = mark_safe(self.options.get("link_separator") or "")
        html = separator.join(self.item(entry) for entry in self.entries())
        return self.container(mark_safe(html))


class BootstrapLinkRenderer(LinkRenderer):
    """Разметка под Bootstrap: <nav><ul class="pagination"> с <li class="page-item">."""

    container_tag = "nav"

    def _li(self, css: str, inner: SafeString) -> SafeString:
        return format_html('<li class="page-item{}">{}</li>', css, inner)

    def page_number(self, entry: LinkEntry) -> SafeString:
        if entry.current:
            return self._li(" active", format_html('<span class="page-link" aria-current="page">{}</span>', entry.number))
        return self._li("", format_html('<a class="page-link" href="{}">{}</a>', self.url(entry.number), entry.number))

    def gap(self) -> SafeString:
        text = resolve(["page_gap"], {}, lambda _: "&hellip;")
        return self._li(" disabled", format_html('<span class="page-link">{}</span>', mark_safe(text)))

    def previous_or_next(self, entry: LinkEntry) -> SafeString:
        label = mark_safe(self.options[f"{entry.kind}_label"])
        if entry.disabled:
            return self._li(" disabled", format_html('<span class="page-link">{}</span>', label))
        rel = "prev" if entry.kind == PREVIOUS else "next"
        return self._li("", format_html('<a class="page-link" rel="{}" href="{}">{}</a>', rel, self.url(entry.number), label))

    def container(self, html: SafeString) -> SafeString:
        ul = format_html('<ul class="{}">{}</ul>', self.options.get("class") or "pagination", html)
        if not self.options.get("container", True):
            return ul
        attrs = {k: v for k, v in container_attrs(self.options).items() if k != "class"}
        attrs.setdefault("aria-label", "pagination")
        return format_html("<nav{}>{}</nav>", flatatt(attrs), ul)


RENDERERS: Dict[str, Callable[[], Any]] = {
    "html": LinkRenderer,
    "bootstrap": BootstrapLinkRenderer,
}


def register_renderer(name: str, factory: Callable[[], Any]) -> None:
    RENDERERS[name] = factory


def get_renderer(spec: Any):
    """Имя из реестра, класс или готовый объект с prepare()/to_html()."""
    if spec is None:
        raise PaginationConfigError("renderer not specified")
    if isinstance(spec, str):
        try:
            factory = RENDERERS[spec]
        except KeyError:
            raise PaginationConfigError(
                f"unknown renderer {spec!r}; available: {', '.join(sorted(RENDERERS))}"
            ) from None
        return factory()
    if isinstance(spec, type):
        return spec()
    if callable(getattr(spec, "prepare", None)) and callable(getattr(spec, "to_html", None)):
        return spec
    raise PaginationConfigError(f"renderer {spec!r} has no prepare()/to_html()")


def _request_from(context: Any) -> Optional[Any]:
    """request из контекста шаблона, из dict или сам HttpRequest."""
    if context is None:
        return None
    if hasattr(context, "GET") and hasattr(context, "path"):
        return context
    try:
        return context.get("request")
    except AttributeError:
        return None
