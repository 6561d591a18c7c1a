# PL/pagelinks/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/serializers.py
# Назначение: DRF-сериализаторы для структуры пагинации (без HTML)
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # импорт базового сериализатора


class LinkEntrySerializer(serializers.Serializer):
    """Один элемент окна: page / gap / previous / next."""
    kind = serializers.ChoiceField(choices=["page", "gap", "previous", "next"])
    number = serializers.IntegerField(allow_null=True)  # None у gap и у отсутствующего соседа
    current = serializers.BooleanField()
    disabled = serializers.BooleanField()


class WindowQuerySerializer(serializers.Serializer):
    """Валидация GET-параметров для /api/window/."""
    page = serializers.IntegerField(min_value=1, default=1)
    total = serializers.IntegerField(min_value=0)
    inner = serializers.IntegerField(min_value=0, default=4)
    outer = serializers.IntegerField(min_value=0, default=1)
    page_links = serializers.BooleanField(default=True)

    def validate(self, attrs):
        # за последней страницей соседей нет; при total=0 допустима только page=1
        if attrs["page"] > max(attrs["total"], 1):
            raise serializers.ValidationError({"page": f"page must be between 1 and {max(attrs['total'], 1)}"})
        return attrs


class EntriesInfoQuerySerializer(serializers.Serializer):
    """Валидация GET-параметров для /api/entries-info/."""
    page = serializers.IntegerField(min_value=1, default=1)
    per = serializers.IntegerField(min_value=1, default=20)
    total = serializers.IntegerField(min_value=0)
    model = serializers.CharField(required=False, allow_blank=False)
    locale = serializers.CharField(required=False, allow_blank=False)

    def validate(self, attrs):
        total_pages = (attrs["total"] + attrs["per"] - 1) // attrs["per"]
        last = max(total_pages, 1)
        if attrs["page"] > last:
            raise serializers.ValidationError({"page": f"page must be between 1 and {last}"})
        return attrs
