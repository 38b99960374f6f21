"""Celery tasks for the meeting room domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from .models import MeetingRoomBooking
from .services import send_room_notification
from .status import refresh_room_status_cache

logger = logging.getLogger(__name__)


@shared_task(name="rooms.refresh_meeting_room_statuses")
def refresh_meeting_room_statuses() -> int:
    """Bring every room's stored status in line with today's bookings."""
    changed = refresh_room_status_cache()
    if changed:
        logger.info(f"Meeting room status refresh: {changed} rooms updated")
    return changed


@shared_task(name="rooms.resend_pending_confirmations")
def resend_pending_room_confirmations() -> dict[str, int]:
    """
    Retry room confirmation emails that failed at booking time.

    Returns:
        dict: {"sent": delivered now, "failed": still pending}
    """
    batch_size = getattr(settings, "NOTIFICATION_RETRY_BATCH", 50)
    today = timezone.localdate()
    pending = (
        MeetingRoomBooking.objects.pending_notification()
        .filter(booking_date__gte=today)
        .select_related("meeting_room")
        .order_by("booking_date", "start_time")[:batch_size]
    )

    sent_count = 0
    failed_count = 0
    for booking in pending:
        if send_room_notification(booking):
            sent_count += 1
        else:
            failed_count += 1

    if sent_count or failed_count:
        logger.info(f"Room confirmation retry: {sent_count} sent, {failed_count} still pending")

    return {"sent": sent_count, "failed": failed_count}
