# PL/PL/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/PL/settings.py
# Назначение: глобальные настройки демо-проекта Django для приложения pagelinks
# Принципы: секреты и флаги — из .env, настройки пагинации — в словаре PAGELINKS
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR — корень проекта. Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Флаг режима разработки. В продакшене должен быть False.
DEBUG = os.getenv("DEBUG", "1") == "1"

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Без ключа в проде запуск небезопасен; в Dev подставляем заглушку
if not SECRET_KEY:
    if not DEBUG:
        raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")
    SECRET_KEY = "dev-insecure-pagelinks-key"

# Список разрешённых хостов. В Dev можно оставить пустым, в проде — обязательно заполнить.
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.contenttypes",     # контент-тайпы (нужны auth)
    "django.contrib.auth",             # система аутентификации (DRF на неё опирается)
    "django.contrib.sessions",         # сессии
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF — API фреймворк
    "pagelinks.apps.PagelinksConfig",  # приложение пагинации
]

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.contrib.sessions.middleware.SessionMiddleware", # поддержка сессий
    "django.middleware.locale.LocaleMiddleware",            # язык из Accept-Language → get_language()
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.csrf.CsrfViewMiddleware",            # защита от CSRF
    "django.contrib.auth.middleware.AuthenticationMiddleware",  # аутентификация пользователя
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "PL.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст (нужен для URL страниц)
            ],
        },
    },
]

WSGI_APPLICATION = "PL.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# Пагинация своих таблиц не держит; SQLite нужна только сессиям/auth.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
    }
}

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "en-us"       # язык по умолчанию — английские фразы из фоллбеков
LANGUAGES = [
    ("en", "English"),
    ("ru", "Русский"),
]
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в БД в UTC (рекомендовано)

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики

# ── Первичный ключ по умолчанию ─────────────────────────────────────────────

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
    ],
    "UNAUTHENTICATED_USER": None,  # ручки пагинации публичные, пользователь не нужен
}

# ── Пагинация (pagelinks) ────────────────────────────────────────────────────
# OPTIONS — глобальные умолчания (читаются один раз в AppConfig.ready).
# Подписи previous/next задавайте через TRANSLATIONS, а не через OPTIONS.
PAGELINKS = {
    "OPTIONS": {
        "inner_window": int(os.getenv("PAGELINKS_INNER_WINDOW", "4")),  # ссылки вокруг текущей
        "outer_window": int(os.getenv("PAGELINKS_OUTER_WINDOW", "1")),  # ссылки по краям
    },
    "TRANSLATIONS": {
        # пример: "ru": {"pagelinks": {"previous_label": "« Сюда"}}
    },
}

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pagelinks": {
            "handlers": ["console"],
            "level": os.getenv("PAGELINKS_LOG_LEVEL", "INFO"),  # DEBUG — видно каждый рендер
        },
    },
}
