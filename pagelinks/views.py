# PL/pagelinks/views.py
from dataclasses import dataclass
from typing import Any

from django.core.paginator import Paginator
from django.views.generic import TemplateView

PER_CHOICES = (10, 20, 50, 100)
DEFAULT_PER = 20


@dataclass(frozen=True)
class Article:
    number: int
    title: str


class DemoListView(TemplateView):
    """Демо-страница: синтетический список статей + все теги пагинации."""
    template_name = "pagelinks/demo.html"
    total_articles = 237

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)

        # невалидное per → падение к 20
        try:
            per = int(self.request.GET.get("per") or DEFAULT_PER)
        except ValueError:
            per = DEFAULT_PER
        if per not in PER_CHOICES:
            per = DEFAULT_PER

        articles = [Article(i, f"Статья №{i}") for i in range(1, self.total_articles + 1)]
        page_obj = Paginator(articles, per).get_page(self.request.GET.get("page"))

        ctx.update({
            "title": "Пагинация — демо",
            "page_obj": page_obj,
            "per": per,
        })
        return ctx
