# PL/pagelinks/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/api_views.py
# Назначение: DRF-ручки, отдающие структуру пагинации в JSON (для SPA/мобильных клиентов)
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

from rest_framework.decorators import api_view  # функциональные DRF-представления
from rest_framework.response import Response    # DRF-ответ

from .serializers import EntriesInfoQuerySerializer, LinkEntrySerializer, WindowQuerySerializer
from .services.collection import PageCollection
from .services.entries_info import page_entries_info
from .services.pagination import navigation_entries


@api_view(["GET"])
def api_window(request):
    """
    Окно пагинации без HTML.
    Параметры (GET): total (обязателен), page=1, inner=4, outer=1, page_links=true.
    """
    query = WindowQuerySerializer(data=request.query_params.dict())
    query.is_valid(raise_exception=True)  # 400 с описанием ошибок
    q = query.validated_data

    entries = navigation_entries(
        q["page"], q["total"],
        inner_window=q["inner"], outer_window=q["outer"], page_links=q["page_links"],
    )
    return Response({
        "page": q["page"],
        "total_pages": q["total"],
        "entries": LinkEntrySerializer([e.as_dict() for e in entries], many=True).data,
    })


@api_view(["GET"])
def api_entries_info(request):
    """
    Строка «Displaying entries 6 - 12 of 26 in total» обычным текстом.
    Параметры (GET): total (число записей, обязателен), page=1, per=20, model, locale.
    """
    query = EntriesInfoQuerySerializer(data=request.query_params.dict())
    query.is_valid(raise_exception=True)
    q = query.validated_data

    total_pages = (q["total"] + q["per"] - 1) // q["per"]
    offset = (q["page"] - 1) * q["per"]
    length = max(0, min(q["per"], q["total"] - offset))
    collection = PageCollection(
        total_pages=total_pages, current_page=q["page"], total_entries=q["total"],
        per_page=q["per"], offset=offset, length=length,
    )
    text = page_entries_info(collection, model=q.get("model"), html=False, locale=q.get("locale"))
    return Response({"text": text, "total_pages": total_pages})
