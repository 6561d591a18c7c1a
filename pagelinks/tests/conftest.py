# PL/pagelinks/tests/conftest.py
import pytest
from django.utils import translation

from pagelinks.services import options as options_module
from pagelinks.services.collection import PageCollection
from pagelinks.services.phrases import reset_store


@pytest.fixture(autouse=True)
def _clean_pagelinks_state():
    """Глобальные умолчания и кэш переводов — общие на процесс; сбрасываем до и после теста."""
    reset_store()
    # LocaleMiddleware оставляет язык активным в потоке; каждый тест начинаем с английского
    with translation.override("en-us"):
        yield
    options_module.reset_defaults()
    options_module._warned.clear()
    reset_store()


@pytest.fixture
def make_collection():
    """Фабрика PageCollection без элементов (модель по умолчанию — 'entry')."""
    def _make(total_pages, current_page=1, total_entries=None, per_page=10, offset=None, length=None, **kw):
        if total_entries is None:
            total_entries = total_pages * per_page
        if offset is None:
            offset = (current_page - 1) * per_page
        if length is None:
            length = max(0, min(per_page, total_entries - offset))
        return PageCollection(total_pages=total_pages, current_page=current_page,
                              total_entries=total_entries, per_page=per_page,
                              offset=offset, length=length, **kw)
    return _make
