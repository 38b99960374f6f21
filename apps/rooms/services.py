"""Domain services for meeting room booking workflows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from django.db import transaction  # type: ignore

from apps.notifications.services import Notifier, get_notifier
from shared.domain.exceptions import BookingConflictError, NotificationError, ResourceNotFoundError
from shared.domain.value_objects import TimeSlot

from .models import MeetingRoom, MeetingRoomBooking

logger = logging.getLogger(__name__)


@dataclass
class MeetingRoomBookingRequest:
    meeting_room_id: int
    booker_name: str
    designation: str
    contact: str
    email: str
    booking_date: date
    start_time: time
    end_time: time

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(self.start_time, self.end_time)


def is_room_available(room_id: int, booking_date: date, start_time: time, end_time: time) -> bool:
    """True when the room exists and no booking on that date blocks the slot."""
    room = MeetingRoom.objects.filter(pk=room_id).first()
    if room is None:
        return False
    return not MeetingRoomBooking.objects.overlapping(room, booking_date, start_time, end_time).exists()


@transaction.atomic(durable=True)
def _reserve_meeting_room(request: MeetingRoomBookingRequest) -> MeetingRoomBooking:
    # Outermost transaction: the booking is committed before confirmation goes out.
    slot = request.slot
    try:
        # Row lock serialises concurrent bookings of the same room.
        room = MeetingRoom.objects.select_for_update().get(pk=request.meeting_room_id)
    except MeetingRoom.DoesNotExist:
        raise ResourceNotFoundError("Meeting Room", "id", request.meeting_room_id)

    overlapping = MeetingRoomBooking.objects.overlapping(room, request.booking_date, slot.start, slot.end)
    if overlapping.exists():
        raise BookingConflictError("meeting room", room.pk, request.booking_date, slot)

    return MeetingRoomBooking.objects.create(
        meeting_room=room,
        booker_name=request.booker_name,
        designation=request.designation,
        contact=request.contact,
        email=request.email,
        booking_date=request.booking_date,
        start_time=slot.start,
        end_time=slot.end,
    )


def send_room_notification(booking: MeetingRoomBooking, notifier: Optional[Notifier] = None) -> bool:
    """Best-effort confirmation to the booker; failures are logged, not raised."""
    notifier = notifier or get_notifier()
    try:
        notifier.send_room_confirmation(booking)
    except NotificationError as e:
        logger.error(f"Failed to send confirmation for room booking {booking.pk}: {e}", exc_info=True)
        return False
    except Exception as e:
        logger.error(f"Unexpected error sending confirmation for room booking {booking.pk}: {e}", exc_info=True)
        return False

    booking.email_sent = True
    booking.save(update_fields=["email_sent"])
    return True


def book_meeting_room(
    request: MeetingRoomBookingRequest,
    *,
    notifier: Optional[Notifier] = None,
) -> MeetingRoomBooking:
    """Book a room slot; the room's stored status is left alone."""
    booking = _reserve_meeting_room(request)
    logger.info(
        "Meeting room %s booked for %s %s by %s (booking %s)",
        booking.meeting_room.room_number,
        booking.booking_date,
        booking.slot,
        booking.email,
        booking.pk,
    )
    send_room_notification(booking, notifier)
    return booking


@transaction.atomic
def cancel_meeting_room_booking(booking_id: int) -> None:
    deleted, _ = MeetingRoomBooking.objects.filter(pk=booking_id).delete()
    if not deleted:
        raise ResourceNotFoundError("Booking", "id", booking_id)
    logger.info("Meeting room booking %s cancelled", booking_id)
