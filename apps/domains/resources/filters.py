# -*- coding: utf-8 -*-

import django_filters
from django.db.models import Q

from .models import Resource


# ==================================================
# Resource Filter
# ==================================================

class ResourceFilter(django_filters.FilterSet):
    """
    목록 조회 필터 (가시성 판정 전 단계).
    ?course=&branch=&semester=&type=&year=&privacy=&search=
    """
    course = django_filters.CharFilter(field_name="course")
    branch = django_filters.CharFilter(field_name="branch")
    semester = django_filters.CharFilter(field_name="semester")
    type = django_filters.CharFilter(field_name="resource_type")
    year = django_filters.CharFilter(field_name="year")
    privacy = django_filters.ChoiceFilter(field_name="privacy", choices=Resource.Privacy.choices)

    # ----- 텍스트 검색 (title / subject / description 부분 일치) -----
    search = django_filters.CharFilter(method="filter_search")

    def filter_search(self, qs, name, value):
        value = (value or "").strip()
        if not value:
            return qs
        return qs.filter(
            Q(title__icontains=value)
            | Q(subject__icontains=value)
            | Q(description__icontains=value)
        )

    class Meta:
        model = Resource
        fields = []
