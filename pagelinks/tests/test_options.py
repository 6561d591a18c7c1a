import logging

from pagelinks.apps import load_settings
from pagelinks.services.options import (
    DEFAULT_OPTIONS, configure, container_attrs, get_defaults, merge_options, reset_defaults, validate_options,
)
from pagelinks.services.phrases import resolve


def test_merge_overrides_win_and_unknown_keys_survive():
    merged = merge_options(DEFAULT_OPTIONS, {"inner_window": 2, "style": "color:blue"})
    assert merged["inner_window"] == 2
    assert merged["outer_window"] == 1
    assert merged["style"] == "color:blue"


def test_merge_does_not_mutate_inputs():
    defaults = dict(DEFAULT_OPTIONS)
    overrides = {"page_links": False}
    merge_options(defaults, overrides)
    assert defaults == DEFAULT_OPTIONS
    assert overrides == {"page_links": False}


def test_merge_is_idempotent():
    overrides = {"inner_window": 7, "id": "pager", "container": False}
    once = merge_options(DEFAULT_OPTIONS, overrides)
    assert merge_options(once, overrides) == once


def test_merge_without_overrides_is_copy():
    merged = merge_options(DEFAULT_OPTIONS, None)
    assert merged == DEFAULT_OPTIONS
    assert merged is not DEFAULT_OPTIONS


def test_validate_reports_deprecated_keys():
    assert validate_options({"inner_window": 2}) == []
    assert validate_options({"previous_label": None, "renderer": "html"}) == []
    warnings = validate_options({"previous_label": "Back", "next_label": "Fwd", "renderer": "bootstrap"})
    assert len(warnings) == 3
    assert "pagelinks.previous_label" in warnings[0]
    assert "renderer" in warnings[2]


def test_configure_updates_defaults_and_warns_once(caplog):
    with caplog.at_level(logging.WARNING, logger="pagelinks.services.options"):
        first = configure(next_label="Onward", inner_window=3)
        second = configure(next_label="Onward")
    assert first == second and len(first) == 1
    assert len(caplog.records) == 1
    assert get_defaults()["inner_window"] == 3
    assert get_defaults()["next_label"] == "Onward"


def test_get_defaults_returns_copy():
    get_defaults()["inner_window"] = 100
    assert get_defaults()["inner_window"] == 4


def test_reset_defaults():
    configure(outer_window=3)
    reset_defaults()
    assert get_defaults() == DEFAULT_OPTIONS


def test_container_attrs_keep_class_and_unknown_keys():
    options = merge_options(DEFAULT_OPTIONS, {"style": "color:blue", "hidden": False, "title": None})
    assert container_attrs(options) == {"class": "pagination", "style": "color:blue"}


def test_load_settings_from_django_settings(settings):
    settings.PAGELINKS = {
        "OPTIONS": {"inner_window": 2, "renderer": "bootstrap"},
        "TRANSLATIONS": {"en": {"pagelinks": {"next_label": "Onward"}}},
    }
    warnings = load_settings()
    assert len(warnings) == 1 and "renderer" in warnings[0]
    assert get_defaults()["inner_window"] == 2
    assert get_defaults()["renderer"] == "bootstrap"
    assert resolve(["next_label"], {}, lambda _: "Next", locale="en") == "Onward"
