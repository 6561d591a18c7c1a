import pytest
from django.utils import translation

from pagelinks.exceptions import PaginationConfigError
from pagelinks.helpers import pagination_link_tags, will_paginate
from pagelinks.renderers import BootstrapLinkRenderer, LinkRenderer, get_renderer, register_renderer, RENDERERS
from pagelinks.services.options import configure


@pytest.fixture
def page3(make_collection):
    # 10 страниц по 10, открыта третья
    return make_collection(total_pages=10, current_page=3)


def test_nothing_rendered_for_single_page(make_collection):
    assert will_paginate(make_collection(total_pages=1)) is None
    assert will_paginate(make_collection(total_pages=0, total_entries=0)) is None


def test_default_markup(page3):
    html = will_paginate(page3, {"inner_window": 1})
    assert html.startswith('<div class="pagination">') and html.endswith("</div>")
    assert '<a class="previous_page" rel="prev" href="?page=2">&#8592; Previous</a>' in html
    assert '<a class="next_page" rel="next" href="?page=4">Next &#8594;</a>' in html
    assert '<em class="current" aria-current="page">3</em>' in html
    assert '<a rel="start" href="?page=1">1</a>' in html
    assert '<span class="gap">&hellip;</span>' in html
    assert 'href="?page=10">10</a>' in html
    assert 'href="?page=6"' not in html


def test_disabled_previous_on_first_page(make_collection):
    html = will_paginate(make_collection(total_pages=5, current_page=1))
    assert '<span class="previous_page disabled">&#8592; Previous</span>' in html
    assert 'rel="next" href="?page=2"' in html


def test_extra_options_become_container_attributes(page3):
    html = will_paginate(page3, {"style": "color:blue", "class": "pager"})
    assert html.startswith('<div class="pager" style="color:blue">')


def test_no_container_and_custom_separator(page3):
    html = will_paginate(page3, {"container": False, "link_separator": " | ", "page_links": False})
    assert not html.startswith("<div")
    assert html == (
        '<a class="previous_page" rel="prev" href="?page=2">&#8592; Previous</a>'
        ' | '
        '<a class="next_page" rel="next" href="?page=4">Next &#8594;</a>'
    )


def test_call_site_labels_win(page3):
    html = will_paginate(page3, {"previous_label": "Back", "next_label": "Forward"})
    assert ">Back</a>" in html and ">Forward</a>" in html


def test_localized_labels():
    from pagelinks.services.collection import PageCollection
    coll = PageCollection(total_pages=3, current_page=2, total_entries=30, per_page=10, offset=10, length=10)
    with translation.override("ru"):
        html = will_paginate(coll)
    assert "&#8592; Назад" in html and "Вперёд &#8594;" in html


def test_page_urls_keep_request_query(rf, page3):
    request = rf.get("/articles/", {"q": "django", "page": "3"})
    html = will_paginate(page3, {"param_name": "page", "params": {"sort": "new"}}, {"request": request})
    assert 'href="/articles/?q=django&amp;page=2&amp;sort=new"' in html


def test_custom_param_name(page3):
    html = will_paginate(page3, {"param_name": "p"})
    assert 'href="?p=4"' in html


def test_bootstrap_renderer(page3):
    html = will_paginate(page3, {"renderer": "bootstrap", "inner_window": 1})
    assert html.startswith('<nav aria-label="pagination"><ul class="pagination">')
    assert '<li class="page-item active"><span class="page-link" aria-current="page">3</span></li>' in html
    assert '<li class="page-item"><a class="page-link" href="?page=4">4</a></li>' in html
    assert '<li class="page-item disabled"><span class="page-link">&hellip;</span></li>' in html


def test_global_renderer_default(page3):
    configure(renderer="bootstrap")
    assert will_paginate(page3).startswith("<nav")


def test_get_renderer_variants():
    assert isinstance(get_renderer("html"), LinkRenderer)
    assert isinstance(get_renderer(BootstrapLinkRenderer), BootstrapLinkRenderer)
    instance = LinkRenderer()
    assert get_renderer(instance) is instance


@pytest.mark.parametrize("bad", [None, "nope", object()])
def test_bad_renderer_fails_fast(page3, bad):
    with pytest.raises(PaginationConfigError):
        will_paginate(page3, {"renderer": bad})


def test_register_renderer(page3):
    class PlainRenderer:
        def prepare(self, collection, options, context):
            self.collection = collection

        def to_html(self):
            return f"page {self.collection.current_page} of {self.collection.total_pages}"

    register_renderer("plain", PlainRenderer)
    try:
        assert will_paginate(page3, {"renderer": "plain"}) == "page 3 of 10"
    finally:
        RENDERERS.pop("plain")


def test_pagination_link_tags(rf, page3):
    request = rf.get("/items/", {"page": "3", "q": "x"})
    html = pagination_link_tags(page3, request=request)
    assert html == (
        '<link rel="prev" href="http://testserver/items/?page=2&amp;q=x" />\n'
        '<link rel="next" href="http://testserver/items/?page=4&amp;q=x" />'
    )


def test_pagination_link_tags_edges(make_collection):
    first = make_collection(total_pages=2, current_page=1)
    assert pagination_link_tags(first, url_builder=lambda n: f"/p/{n}") == '<link rel="next" href="/p/2" />'
    only = make_collection(total_pages=1, current_page=1)
    assert pagination_link_tags(only, url_builder=lambda n: f"/p/{n}") == ""
