# pagelinks/apps.py
import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


def load_settings():
    """
    Читаем settings.PAGELINKS один раз при старте:
      OPTIONS      — глобальные умолчания пагинации (inner_window, class, ...);
      TRANSLATIONS — {locale: {...}} поверх встроенного каталога.
    Возвращаем список предупреждений о устаревших ключах.
    """
    from .services.options import configure, reset_defaults
    from .services.phrases import get_store, reset_store

    conf = getattr(settings, "PAGELINKS", {}) or {}
    reset_defaults()
    warnings = configure(**(conf.get("OPTIONS") or {}))

    # переводы подтянет get_store() из того же settings.PAGELINKS
    reset_store()
    store = get_store()
    logger.debug("pagelinks: locales loaded: %s", ", ".join(store.locales()))
    return warnings


class PagelinksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pagelinks"
    verbose_name = "Пагинация"

    def ready(self):
        load_settings()
