from __future__ import annotations

from django.contrib import admin

from .models import MeetingRoom, MeetingRoomBooking


@admin.register(MeetingRoom)
class MeetingRoomAdmin(admin.ModelAdmin):
    list_display = ("room_number", "room_name", "capacity", "has_projector", "has_video_conference", "status")
    list_filter = ("status", "has_projector", "has_video_conference")
    search_fields = ("room_number", "room_name")


@admin.register(MeetingRoomBooking)
class MeetingRoomBookingAdmin(admin.ModelAdmin):
    list_display = ("meeting_room", "booking_date", "start_time", "end_time", "booker_name", "email", "email_sent")
    list_filter = ("booking_date", "email_sent")
    search_fields = ("meeting_room__room_number", "meeting_room__room_name", "booker_name", "email")
    readonly_fields = ("created_at",)
