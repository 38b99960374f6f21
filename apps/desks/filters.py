"""FilterSet definitions for desk and desk booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from shared.infrastructure.filters import filter_by_status_choice

from .models import Desk, DeskBooking


class DeskFilterSet(django_filters.FilterSet):
    status = django_filters.CharFilter(method="filter_status")
    department = django_filters.CharFilter(method="filter_department")
    vacant_in_department = django_filters.CharFilter(method="filter_vacant_in_department")
    occupant = django_filters.CharFilter(method="filter_occupant")
    floor = django_filters.NumberFilter(field_name="floor", lookup_expr="exact")

    class Meta:
        model = Desk
        fields = ["status", "department", "vacant_in_department", "occupant", "floor"]

    def filter_status(self, queryset, name, value):  # type: ignore
        return filter_by_status_choice(queryset, value, Desk.Status)

    def filter_department(self, queryset, name, value):  # type: ignore
        return queryset.by_department(value)

    def filter_vacant_in_department(self, queryset, name, value):  # type: ignore
        return queryset.vacant_in_department(value)

    def filter_occupant(self, queryset, name, value):  # type: ignore
        return queryset.by_occupant(value)


class DeskBookingFilterSet(django_filters.FilterSet):
    desk_id = django_filters.NumberFilter(method="filter_desk")
    date = django_filters.DateFilter(method="filter_date")
    email = django_filters.CharFilter(method="filter_email")
    friend_email = django_filters.CharFilter(method="filter_friend_email")
    department = django_filters.CharFilter(method="filter_department")

    class Meta:
        model = DeskBooking
        fields = ["desk_id", "date", "email", "friend_email", "department"]

    def filter_desk(self, queryset, name, value):  # type: ignore
        return queryset.for_desk(int(value))

    def filter_date(self, queryset, name, value):  # type: ignore
        return queryset.on_date(value)

    def filter_email(self, queryset, name, value):  # type: ignore
        return queryset.for_email(value)

    def filter_friend_email(self, queryset, name, value):  # type: ignore
        return queryset.for_friend_email(value)

    def filter_department(self, queryset, name, value):  # type: ignore
        return queryset.for_department(value)
