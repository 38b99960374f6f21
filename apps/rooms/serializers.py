"""Serializers for the meeting room domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import MeetingRoom, MeetingRoomBooking
from .services import MeetingRoomBookingRequest, book_meeting_room
from .status import derive_room_status


class MeetingRoomSerializer(serializers.ModelSerializer):
    """
    Meeting room representation.

    When the serializer context carries ``status_date`` (and optionally
    ``status_time``) the reported status is derived from bookings rather
    than read from the stored cache.
    """

    class Meta:
        model = MeetingRoom
        fields = [
            "id",
            "room_number",
            "room_name",
            "capacity",
            "has_projector",
            "has_video_conference",
            "status",
        ]
        read_only_fields = ["id", "status"]

    def to_representation(self, instance):  # type: ignore
        data = super().to_representation(instance)
        status_date = self.context.get("status_date")
        if status_date is not None:
            data["status"] = derive_room_status(instance, status_date, self.context.get("status_time"))
        return data


class RoomTimeSlotSerializer(serializers.Serializer):
    date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()

    def validate(self, attrs):  # type: ignore
        if attrs["start_time"] >= attrs["end_time"]:
            raise serializers.ValidationError({"end_time": "End time must be after start time."})
        return attrs


class RoomStatusQuerySerializer(serializers.Serializer):
    date = serializers.DateField()
    time = serializers.TimeField(required=False)


class MeetingRoomBookingCreateSerializer(serializers.Serializer):
    """Validates a room booking request and hands it to the booking workflow."""

    meeting_room_id = serializers.IntegerField()
    booker_name = serializers.CharField(max_length=100)
    designation = serializers.CharField(max_length=50)
    contact = serializers.CharField(max_length=20)
    email = serializers.EmailField(max_length=50)
    booking_date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()

    def validate(self, attrs):  # type: ignore
        if attrs["start_time"] >= attrs["end_time"]:
            raise serializers.ValidationError({"end_time": "End time must be after start time."})
        return attrs

    def create(self, validated_data):  # type: ignore
        return book_meeting_room(MeetingRoomBookingRequest(**validated_data))


class MeetingRoomBookingSerializer(serializers.ModelSerializer):
    meeting_room_id = serializers.ReadOnlyField(source="meeting_room.id")
    room_number = serializers.ReadOnlyField(source="meeting_room.room_number")
    room_name = serializers.ReadOnlyField(source="meeting_room.room_name")
    start_time = serializers.TimeField(format="%H:%M", read_only=True)
    end_time = serializers.TimeField(format="%H:%M", read_only=True)

    class Meta:
        model = MeetingRoomBooking
        fields = [
            "id",
            "meeting_room_id",
            "room_number",
            "room_name",
            "booker_name",
            "designation",
            "contact",
            "email",
            "booking_date",
            "start_time",
            "end_time",
            "email_sent",
            "created_at",
        ]
        read_only_fields = fields
