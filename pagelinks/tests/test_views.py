import pytest
from django.core.paginator import Paginator
from django.template import Context, Template
from django.urls import reverse


def test_demo_first_page(client):
    r = client.get(reverse("pagelinks:demo"))
    assert r.status_code == 200
    html = r.content.decode("utf-8")
    # 237 статей по 20 → 12 страниц
    assert html.count('class="article"') == 20
    assert "Displaying articles <b>1&nbsp;-&nbsp;20</b> of <b>237</b> in total" in html
    assert '<link rel="next" href="http://testserver/?page=2" />' in html
    assert 'rel="prev"' not in html.split("</head>")[0]
    assert '<em class="current" aria-current="page">1</em>' in html


def test_demo_last_page(client):
    r = client.get(reverse("pagelinks:demo") + "?page=12")
    html = r.content.decode("utf-8")
    assert html.count('class="article"') == 17
    assert '<span class="next_page disabled">' in html
    assert "Displaying articles <b>221&nbsp;-&nbsp;237</b> of <b>237</b> in total" in html


@pytest.mark.parametrize("per", ["999", "abc", ""])
def test_demo_per_fallback(client, per):
    r = client.get(reverse("pagelinks:demo") + f"?per={per}")
    assert r.status_code == 200
    assert r.content.decode("utf-8").count('class="article"') == 20


def test_demo_keeps_other_query_params(client):
    r = client.get(reverse("pagelinks:demo") + "?per=50&page=2")
    html = r.content.decode("utf-8")
    assert html.count('class="article"') == 50
    assert 'href="/?per=50&amp;page=3"' in html


def test_demo_russian(client):
    r = client.get(reverse("pagelinks:demo"), HTTP_ACCEPT_LANGUAGE="ru")
    html = r.content.decode("utf-8")
    assert "Вперёд &#8594;" in html
    assert "Показаны articles <b>1&nbsp;-&nbsp;20</b> из <b>237</b>" in html


def test_template_tags_render_nothing_for_single_page():
    page = Paginator(["a", "b"], 10).get_page(1)
    out = Template(
        "{% load pagelinks_extras %}[{% will_paginate page_obj %}]{% page_entries_info page_obj model='entry' %}"
    ).render(Context({"page_obj": page}))
    assert out == "[]Displaying <b>all&nbsp;2</b> entries"


def test_template_tag_options_and_plain_info():
    page = Paginator(list(range(30)), 10).get_page(2)
    out = Template(
        "{% load pagelinks_extras %}"
        "{% will_paginate page_obj id='pager' page_links=False %}|"
        "{% page_entries_info page_obj model='entry' html=False %}"
    ).render(Context({"page_obj": page}))
    pager, info = out.split("|")
    assert pager.startswith('<div class="pagination" id="pager">')
    assert "<em" not in pager
    assert info == "Displaying entries 11 - 20 of 30 in total"


def test_page_window_tag_is_inner_window_only():
    template_text = (
        "{% load pagelinks_extras %}{% page_window page_obj 1 as win %}"
        "{% for e in win %}{% if e.current %}[{{ e.number }}]{% else %}{{ e.number }}{% endif %} {% endfor %}"
    )
    page = Paginator(list(range(100)), 10).get_page(6)
    assert Template(template_text).render(Context({"page_obj": page})) == "5 [6] 7 "
    # у края окно обрезается, пропусков и крайних страниц нет
    page = Paginator(list(range(100)), 10).get_page(1)
    assert Template(template_text).render(Context({"page_obj": page})) == "[1] 2 "
