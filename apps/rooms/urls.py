"""URL routing for the meeting room domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import MeetingRoomBookingViewSet, MeetingRoomViewSet

router = DefaultRouter()
router.register(r"bookings", MeetingRoomBookingViewSet, basename="meeting-room-booking")
router.register(r"", MeetingRoomViewSet, basename="meeting-room")

urlpatterns = [
    path("", include(router.urls)),
]
