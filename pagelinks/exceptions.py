# PL/pagelinks/exceptions.py
from django.core.exceptions import ImproperlyConfigured


class PaginationConfigError(ImproperlyConfigured):
    """Ошибка конфигурации пагинации: неизвестный рендерер, непереводимое имя модели и т.п."""
