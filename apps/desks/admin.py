"""Admin registration for desks."""

from __future__ import annotations

from django.contrib import admin

from .models import Desk, DeskBooking


@admin.register(Desk)
class DeskAdmin(admin.ModelAdmin):
    list_display = ("desk_number", "floor", "department", "status", "occupant_name", "occupant_department")
    list_filter = ("status", "floor", "department")
    search_fields = ("desk_number", "occupant_name")


@admin.register(DeskBooking)
class DeskBookingAdmin(admin.ModelAdmin):
    list_display = (
        "desk",
        "booking_date",
        "booker_name",
        "email",
        "is_for_friend",
        "friend_name",
        "email_sent",
        "friend_email_sent",
        "created_at",
    )
    list_filter = ("booking_date", "is_for_friend", "email_sent", "department")
    search_fields = ("desk__desk_number", "booker_name", "email", "friend_email")
    readonly_fields = ("created_at",)
