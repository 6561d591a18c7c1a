# PL/pagelinks/api_urls.py
from django.urls import path          # функции маршрутизации
from . import api_views               # импорт функций API

urlpatterns = [
    path("window/",       api_views.api_window,       name="window"),        # окно пагинации
    path("entries-info/", api_views.api_entries_info, name="entries_info"),  # строка «показано X–Y из Z»
]
