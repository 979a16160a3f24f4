"""FilterSet definitions for the news feed."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import News


class NewsFilterSet(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = News
        fields = ["category"]

    def filter_search(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(Q(title__icontains=value) | Q(summary__icontains=value))
