"""Meeting room domain models."""

from __future__ import annotations

from django.db import models  # type: ignore

from shared.domain.value_objects import TimeSlot


class MeetingRoomQuerySet(models.QuerySet):
    def by_status(self, status: str) -> "MeetingRoomQuerySet":
        return self.filter(status=status)

    def search_by_name(self, name: str) -> "MeetingRoomQuerySet":
        return self.filter(room_name__icontains=name)


class MeetingRoom(models.Model):
    """
    A meeting room bookable by time slot.

    ``status`` is a cached value refreshed from bookings by a periodic
    task; read paths that need an accurate answer derive it instead.
    """

    class Status(models.TextChoices):
        VACANT = "VACANT", "Vacant"
        BOOKED = "BOOKED", "Booked"

    room_number = models.CharField(max_length=50, unique=True)
    room_name = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField(default=0)
    has_projector = models.BooleanField(default=False)
    has_video_conference = models.BooleanField(default=False)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.VACANT)

    objects = MeetingRoomQuerySet.as_manager()

    class Meta:
        ordering = ["room_number"]

    def __str__(self) -> str:
        return f"{self.room_number} {self.room_name}"


class MeetingRoomBookingQuerySet(models.QuerySet):
    def for_room(self, room) -> "MeetingRoomBookingQuerySet":
        return self.filter(meeting_room=room)

    def on_date(self, booking_date) -> "MeetingRoomBookingQuerySet":
        return self.filter(booking_date=booking_date)

    def for_room_on_date(self, room, booking_date) -> "MeetingRoomBookingQuerySet":
        return self.filter(meeting_room=room, booking_date=booking_date)

    def for_email(self, email: str) -> "MeetingRoomBookingQuerySet":
        return self.filter(email__iexact=email)

    def overlapping(self, room, booking_date, start_time, end_time) -> "MeetingRoomBookingQuerySet":
        """
        Bookings that block the requested slot.

        An existing booking blocks a request when it starts before the
        request ends and ends at or after the request starts, so a request
        may end exactly when a booking starts but may not begin when one ends.
        """
        return self.filter(
            meeting_room=room,
            booking_date=booking_date,
            start_time__lt=end_time,
            end_time__gte=start_time,
        )

    def pending_notification(self) -> "MeetingRoomBookingQuerySet":
        return self.filter(email_sent=False)


class MeetingRoomBooking(models.Model):
    """A reservation of a meeting room for a time slot on one day."""

    meeting_room = models.ForeignKey(MeetingRoom, on_delete=models.CASCADE, related_name="bookings")
    booker_name = models.CharField(max_length=100)
    designation = models.CharField(max_length=50)
    contact = models.CharField(max_length=20)
    email = models.EmailField(max_length=50)
    booking_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    email_sent = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = MeetingRoomBookingQuerySet.as_manager()

    class Meta:
        ordering = ["-booking_date", "start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="room_booking_valid_times",
            ),
        ]
        indexes = [
            models.Index(fields=["meeting_room", "booking_date"], name="room_booking_room_date_idx"),
            models.Index(fields=["email"], name="room_booking_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.meeting_room.room_number} on {self.booking_date} {self.slot}"

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(self.start_time, self.end_time)
