"""FilterSet definitions for meeting room listings."""

from __future__ import annotations

import django_filters  # type: ignore

from shared.infrastructure.filters import filter_by_status_choice, parse_status_choice

from .models import MeetingRoom, MeetingRoomBooking
from .status import derive_room_status


class MeetingRoomFilterSet(django_filters.FilterSet):
    """
    Meeting room listing filters.

    Without ``date`` the ``status`` filter matches the stored status. With
    ``date`` (and optionally ``time``) it matches the status derived from
    bookings, the same value the listing then reports.
    """

    status = django_filters.CharFilter(method="filter_status")
    date = django_filters.DateFilter(method="filter_status_moment")
    time = django_filters.TimeFilter(method="filter_status_moment")
    name = django_filters.CharFilter(field_name="room_name", lookup_expr="icontains")
    min_capacity = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")
    has_projector = django_filters.BooleanFilter(field_name="has_projector")
    has_video_conference = django_filters.BooleanFilter(field_name="has_video_conference")

    class Meta:
        model = MeetingRoom
        fields = ["status", "date", "time", "name", "has_projector", "has_video_conference"]

    def filter_status(self, queryset, name, value):  # type: ignore
        day = self.form.cleaned_data.get("date")
        if not value or day is None:
            return filter_by_status_choice(queryset, value, MeetingRoom.Status)

        status = parse_status_choice(value, MeetingRoom.Status)
        at = self.form.cleaned_data.get("time")
        matching = [room.pk for room in queryset if derive_room_status(room, day, at) == status]
        return queryset.filter(pk__in=matching)

    def filter_status_moment(self, queryset, name, value):  # type: ignore
        # Only qualifies the status filter; on its own it selects every room.
        return queryset


class MeetingRoomBookingFilterSet(django_filters.FilterSet):
    room_id = django_filters.NumberFilter(method="filter_room")
    date = django_filters.DateFilter(method="filter_date")
    email = django_filters.CharFilter(method="filter_email")

    class Meta:
        model = MeetingRoomBooking
        fields = ["room_id", "date", "email"]

    def filter_room(self, queryset, name, value):  # type: ignore
        return queryset.for_room(int(value))

    def filter_date(self, queryset, name, value):  # type: ignore
        return queryset.on_date(value)

    def filter_email(self, queryset, name, value):  # type: ignore
        return queryset.for_email(value)
