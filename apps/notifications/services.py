"""Notification services for sending booking confirmation emails."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.utils.html import strip_tags  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

from shared.domain.exceptions import NotificationError

if TYPE_CHECKING:  # pragma: no cover
    from apps.desks.models import DeskBooking
    from apps.rooms.models import MeetingRoomBooking

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H:%M"

SIGNATURE = "<p>Thank you for using our booking system.</p><p>Best regards,<br/>Desk Mate Team</p>"


# ============================================================================
# EMAIL DELIVERY
# ============================================================================

def send_email_notification(recipient_email: str, subject: str, html_message: str) -> None:
    """
    Send a single HTML email with a plain-text alternative.

    Args:
        recipient_email: Email of the recipient
        subject: Subject line
        html_message: HTML body; the text body is derived from it

    Raises:
        NotificationError: when the mail backend rejects the message
    """
    try:
        send_mail(
            subject=subject,
            message=strip_tags(html_message),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            html_message=html_message,
            fail_silently=False,
        )
    except Exception as e:
        raise NotificationError(f"Failed to send email to {recipient_email}: {e}") from e

    logger.info(f"Email sent successfully to {recipient_email}: {subject}")


# ============================================================================
# NOTIFIER CONTRACT
# ============================================================================

class Notifier(ABC):
    """Sends booking confirmations. Every method may raise NotificationError."""

    @abstractmethod
    def send_desk_confirmation(self, booking: "DeskBooking") -> None:
        ...

    @abstractmethod
    def send_desk_friend_notification(self, booking: "DeskBooking") -> None:
        ...

    @abstractmethod
    def send_room_confirmation(self, booking: "MeetingRoomBooking") -> None:
        ...


class EmailNotifier(Notifier):
    """Notifier delivering HTML emails through Django's mail backend."""

    def send_desk_confirmation(self, booking: "DeskBooking") -> None:
        friend_line = (
            f"<li><strong>Booked for:</strong> {booking.friend_name}</li>" if booking.is_for_friend else ""
        )
        html_message = f"""
        <html>
        <body>
            <h2>Desk Booking Confirmation</h2>
            <p>Dear {booking.booker_name},</p>
            <p>Your desk booking has been confirmed with the following details:</p>
            <ul>
                <li><strong>Desk Number:</strong> {booking.desk.desk_number}</li>
                <li><strong>Department:</strong> {booking.department}</li>
                <li><strong>Date:</strong> {booking.booking_date.strftime(DATE_FORMAT)}</li>
                {friend_line}
            </ul>
            {SIGNATURE}
        </body>
        </html>
        """
        send_email_notification(booking.email, "Desk Booking Confirmation", html_message)

    def send_desk_friend_notification(self, booking: "DeskBooking") -> None:
        html_message = f"""
        <html>
        <body>
            <h2>Desk Booking Notification</h2>
            <p>Dear {booking.friend_name},</p>
            <p>{booking.booker_name} has booked a desk for you with the following details:</p>
            <ul>
                <li><strong>Desk Number:</strong> {booking.desk.desk_number}</li>
                <li><strong>Department:</strong> {booking.department}</li>
                <li><strong>Date:</strong> {booking.booking_date.strftime(DATE_FORMAT)}</li>
            </ul>
            {SIGNATURE}
        </body>
        </html>
        """
        send_email_notification(booking.friend_email, "Desk Booking Notification", html_message)

    def send_room_confirmation(self, booking: "MeetingRoomBooking") -> None:
        room = booking.meeting_room
        html_message = f"""
        <html>
        <body>
            <h2>Meeting Room Booking Confirmation</h2>
            <p>Dear {booking.booker_name},</p>
            <p>Your meeting room booking has been confirmed with the following details:</p>
            <ul>
                <li><strong>Room Number:</strong> {room.room_number}</li>
                <li><strong>Room Name:</strong> {room.room_name}</li>
                <li><strong>Date:</strong> {booking.booking_date.strftime(DATE_FORMAT)}</li>
                <li><strong>Time:</strong> {booking.start_time.strftime(TIME_FORMAT)} to {booking.end_time.strftime(TIME_FORMAT)}</li>
            </ul>
            {SIGNATURE}
        </body>
        </html>
        """
        send_email_notification(booking.email, "Meeting Room Booking Confirmation", html_message)


def get_notifier() -> Notifier:
    """Instantiate the notifier named by ``settings.NOTIFIER_CLASS``."""
    notifier_path = getattr(settings, "NOTIFIER_CLASS", "apps.notifications.services.EmailNotifier")
    return import_string(notifier_path)()
