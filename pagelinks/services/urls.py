# PL/pagelinks/services/urls.py
from __future__ import annotations
from typing import Any, Dict, Optional

from django.http import QueryDict


def build_page_url(request, page: int, param_name: str = "page",
                   params: Optional[Dict[str, Any]] = None, *, absolute: bool = False) -> str:
    """URL той же страницы, но с другим номером в GET-параметре.

    Остальные параметры запроса (фильтры, сортировка) сохраняются.
    """
    query = request.GET.copy() if request is not None else QueryDict(mutable=True)
    for key, value in (params or {}).items():
        if value is None:
            query.pop(key, None)
        else:
            query[key] = value
    query[param_name] = page
    path = request.path if request is not None else ""
    url = f"{path}?{query.urlencode()}"
    if absolute and request is not None:
        return request.build_absolute_uri(url)
    return url
