"""
Meeting room status derivation.

A room's stored status goes stale as soon as bookings elapse or are
cancelled, so the effective status is computed from the bookings for
the day in question. Both queries fail closed: if anything goes wrong
the room is reported VACANT and the error is only logged.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional

from django.utils import timezone  # type: ignore

from .models import MeetingRoom, MeetingRoomBooking

logger = logging.getLogger(__name__)


def _local_now(now: Optional[datetime]) -> tuple[date, time]:
    # Booking fields are naive local values; compare against local wall time.
    current = now or timezone.localtime()
    return current.date(), current.time()


def room_status_for_date(room: MeetingRoom, day: date, *, now: Optional[datetime] = None) -> str:
    """
    Status of ``room`` for a whole day.

    Past days are always VACANT. For today only bookings that have not
    ended yet count; for future days any booking makes the room BOOKED.
    """
    try:
        today, current_time = _local_now(now)
        if day < today:
            return MeetingRoom.Status.VACANT

        bookings = MeetingRoomBooking.objects.for_room_on_date(room, day)
        if day == today:
            bookings = bookings.filter(end_time__gt=current_time)

        return MeetingRoom.Status.BOOKED if bookings.exists() else MeetingRoom.Status.VACANT
    except Exception as e:
        logger.error(f"Error deriving status of room {getattr(room, 'pk', None)} for {day}: {e}", exc_info=True)
        return MeetingRoom.Status.VACANT


def room_status_for_datetime(
    room: MeetingRoom,
    day: date,
    at: time,
    *,
    now: Optional[datetime] = None,
) -> str:
    """
    Status of ``room`` at a specific time of day.

    Moments in the past are VACANT. Otherwise the room is BOOKED when a
    booking covers ``at``: its start is inclusive and its end exclusive.
    """
    try:
        today, current_time = _local_now(now)
        if day < today or (day == today and at < current_time):
            return MeetingRoom.Status.VACANT

        bookings = MeetingRoomBooking.objects.for_room_on_date(room, day)
        if any(booking.slot.contains(at) for booking in bookings):
            return MeetingRoom.Status.BOOKED
        return MeetingRoom.Status.VACANT
    except Exception as e:
        logger.error(
            f"Error deriving status of room {getattr(room, 'pk', None)} for {day} {at}: {e}",
            exc_info=True,
        )
        return MeetingRoom.Status.VACANT


def derive_room_status(
    room: MeetingRoom,
    day: date,
    at: Optional[time] = None,
    *,
    now: Optional[datetime] = None,
) -> str:
    if at is None:
        return room_status_for_date(room, day, now=now)
    return room_status_for_datetime(room, day, at, now=now)


def refresh_room_status_cache(*, now: Optional[datetime] = None) -> int:
    """Write today's derived status into each room's stored status; returns rooms changed."""
    today, _ = _local_now(now)
    changed = []
    for room in MeetingRoom.objects.all():
        status = room_status_for_date(room, today, now=now)
        if room.status != status:
            room.status = status
            changed.append(room)

    if changed:
        MeetingRoom.objects.bulk_update(changed, ["status"])
    return len(changed)
