"""URL routing for the desk domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import DeskBookingViewSet, DeskViewSet

router = DefaultRouter()
# Bookings first so "bookings/" is not read as a desk id.
router.register(r"bookings", DeskBookingViewSet, basename="desk-booking")
router.register(r"", DeskViewSet, basename="desk")

urlpatterns = [
    path("", include(router.urls)),
]
