from django import template

from pagelinks.helpers import pagination_link_tags as _link_tags
from pagelinks.helpers import will_paginate as _will_paginate
from pagelinks.services.entries_info import page_entries_info as _entries_info
from pagelinks.services.pagination import compute_window

register = template.Library()


@register.simple_tag(takes_context=True)
def will_paginate(context, page_obj, **options):
    """
    {% will_paginate page_obj inner_window=2 style="color:blue" %}
    При одной странице ничего не выводит.
    """
    return _will_paginate(page_obj, options, context) or ""


@register.simple_tag
def page_entries_info(page_obj, model=None, html=True):
    return _entries_info(page_obj, model=model, html=html)


@register.simple_tag(takes_context=True)
def pagination_link_tags(context, page_obj, param_name="page"):
    return _link_tags(page_obj, request=context.get("request"), param_name=param_name)


@register.simple_tag
def page_window(page_obj, inner=2):
    """
    Компактное окно: только страницы в пределах inner от текущей, без краёв и пропусков.
    {% page_window page_obj 2 as win %} → список LinkEntry (number, current).
    """
    return compute_window(page_obj.number, page_obj.paginator.num_pages, int(inner), 0)
