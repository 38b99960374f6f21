"""Serializers for the desk domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Desk, DeskBooking
from .services import DeskBookingRequest, book_desk


class DeskSerializer(serializers.ModelSerializer):
    class Meta:
        model = Desk
        fields = [
            "id",
            "desk_number",
            "department",
            "x_position",
            "y_position",
            "floor",
            "status",
            "occupant_name",
            "occupant_department",
        ]
        read_only_fields = ["id"]


class DeskBookingCreateSerializer(serializers.Serializer):
    """Validates a desk booking request and hands it to the booking workflow."""

    desk_id = serializers.IntegerField()
    booker_name = serializers.CharField(max_length=100)
    department = serializers.CharField(max_length=50)
    designation = serializers.CharField(max_length=50)
    contact = serializers.CharField(max_length=20)
    email = serializers.EmailField(max_length=50)
    booking_date = serializers.DateField()
    is_for_friend = serializers.BooleanField(default=False)
    friend_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    friend_email = serializers.EmailField(max_length=50, required=False, allow_blank=True, default="")

    def validate(self, attrs):  # type: ignore
        if attrs.get("is_for_friend") and not attrs.get("friend_name"):
            raise serializers.ValidationError({"friend_name": "Friend name is required when booking for a friend."})
        return attrs

    def create(self, validated_data):  # type: ignore
        return book_desk(DeskBookingRequest(**validated_data))


class DeskBookingSerializer(serializers.ModelSerializer):
    desk_id = serializers.ReadOnlyField(source="desk.id")
    desk_number = serializers.ReadOnlyField(source="desk.desk_number")

    class Meta:
        model = DeskBooking
        fields = [
            "id",
            "desk_id",
            "desk_number",
            "booker_name",
            "department",
            "designation",
            "contact",
            "email",
            "is_for_friend",
            "friend_name",
            "friend_email",
            "booking_date",
            "email_sent",
            "friend_email_sent",
            "created_at",
        ]
        read_only_fields = fields
