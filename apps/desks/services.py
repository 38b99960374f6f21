"""Domain services for desk booking workflows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from django.db import IntegrityError, transaction  # type: ignore

from apps.notifications.services import Notifier, get_notifier
from shared.domain.exceptions import BookingConflictError, NotificationError, ResourceNotFoundError

from .models import Desk, DeskBooking

logger = logging.getLogger(__name__)


@dataclass
class DeskBookingRequest:
    desk_id: int
    booker_name: str
    department: str
    designation: str
    contact: str
    email: str
    booking_date: date
    is_for_friend: bool = False
    friend_name: str = ""
    friend_email: str = ""


def is_desk_available(desk_id: int, booking_date: date) -> bool:
    """True when the desk exists and nobody has booked it for that date."""
    desk = Desk.objects.filter(pk=desk_id).first()
    if desk is None:
        return False
    return not DeskBooking.objects.for_desk_on_date(desk, booking_date).exists()


@transaction.atomic(durable=True)
def _reserve_desk(request: DeskBookingRequest) -> DeskBooking:
    """
    Conflict check, desk occupancy update and booking insert as one unit.

    The transaction must be the outermost one, so the booking is committed
    by the time confirmations go out.
    """
    try:
        desk = Desk.objects.select_for_update().get(pk=request.desk_id)
    except Desk.DoesNotExist:
        raise ResourceNotFoundError("Desk", "id", request.desk_id)

    # One booking per desk per day, whatever the time of day.
    if DeskBooking.objects.for_desk_on_date(desk, request.booking_date).exists():
        raise BookingConflictError("desk", desk.pk, request.booking_date)

    booking = DeskBooking(
        desk=desk,
        booker_name=request.booker_name,
        department=request.department,
        designation=request.designation,
        contact=request.contact,
        email=request.email,
        is_for_friend=request.is_for_friend,
        friend_name=request.friend_name if request.is_for_friend else "",
        friend_email=request.friend_email if request.is_for_friend else "",
        booking_date=request.booking_date,
    )

    desk.occupy(booking.occupant_name, request.department)
    desk.save(update_fields=["status", "occupant_name", "occupant_department"])

    try:
        with transaction.atomic():
            booking.save()
    except IntegrityError:
        # Lost a race on the (desk, booking_date) unique constraint.
        raise BookingConflictError("desk", desk.pk, request.booking_date)
    return booking


def _deliver(send, booking: DeskBooking, flag: str, recipient: str) -> bool:
    try:
        send(booking)
    except NotificationError as e:
        logger.error(f"Failed to notify {recipient} of desk booking {booking.pk}: {e}", exc_info=True)
        return False
    except Exception as e:
        logger.error(f"Unexpected error notifying {recipient} of desk booking {booking.pk}: {e}", exc_info=True)
        return False

    setattr(booking, flag, True)
    booking.save(update_fields=[flag])
    return True


def send_desk_notifications(booking: DeskBooking, notifier: Optional[Notifier] = None) -> bool:
    """
    Best-effort confirmation dispatch for a committed desk booking.

    The booker gets a confirmation; a friend the desk was booked for gets
    a separate notification. Each delivery is recorded on its own flag and
    skipped once it has gone out, so a retry only resends what failed.
    Failures are logged and reported through the return value, never raised.

    Returns:
        bool: True when nothing is left undelivered
    """
    notifier = notifier or get_notifier()
    delivered = True
    if not booking.email_sent:
        delivered &= _deliver(notifier.send_desk_confirmation, booking, "email_sent", "booker")
    if booking.needs_friend_notification:
        delivered &= _deliver(notifier.send_desk_friend_notification, booking, "friend_email_sent", "friend")
    return delivered


def book_desk(request: DeskBookingRequest, *, notifier: Optional[Notifier] = None) -> DeskBooking:
    """Book a desk for a whole day and notify the booker (and friend)."""
    booking = _reserve_desk(request)
    logger.info(
        "Desk %s booked for %s by %s (booking %s)",
        booking.desk.desk_number,
        booking.booking_date,
        booking.email,
        booking.pk,
    )
    send_desk_notifications(booking, notifier)
    return booking


@transaction.atomic
def cancel_desk_booking(booking_id: int) -> None:
    """Delete a desk booking and free the desk it points to."""
    try:
        booking = DeskBooking.objects.select_related("desk").get(pk=booking_id)
    except DeskBooking.DoesNotExist:
        raise ResourceNotFoundError("Booking", "id", booking_id)

    # Desks track a single current occupant, so the reset is unconditional.
    desk = booking.desk
    desk.release()
    desk.save(update_fields=["status", "occupant_name", "occupant_department"])

    booking.delete()
    logger.info("Desk booking %s cancelled, desk %s is vacant", booking_id, desk.desk_number)
