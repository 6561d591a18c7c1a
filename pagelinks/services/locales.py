# PL/pagelinks/services/locales.py
# Встроенный каталог переводов. Английского нет намеренно: для en работают фоллбеки в коде.
# Плейсхолдеры — в стиле Python: %(count)s, %(model)s, %(from)s, %(to)s.

BUILTIN_TRANSLATIONS = {
    "ru": {
        "pagelinks": {
            "previous_label": "&#8592; Назад",
            "next_label": "Вперёд &#8594;",
            "page_gap": "&hellip;",
            "models": {
                "entry": {
                    "zero": "записей",
                    "one": "запись",
                    "few": "записи",
                    "many": "записей",
                    "other": "записей",
                },
            },
            "page_entries_info": {
                "single_page": {
                    "zero": "%(model)s не найдено",
                    "one": "Показана 1 %(model)s",
                    "other": "Показаны все %(count)s %(model)s",
                },
                "single_page_html": {
                    "zero": "%(model)s не найдено",
                    "one": "Показана <b>1</b> %(model)s",
                    "other": "Показаны <b>все&nbsp;%(count)s</b> %(model)s",
                },
                "multi_page": "Показаны %(model)s %(from)s - %(to)s из %(count)s",
                "multi_page_html": "Показаны %(model)s <b>%(from)s&nbsp;-&nbsp;%(to)s</b> из <b>%(count)s</b>",
            },
        },
    },
}
