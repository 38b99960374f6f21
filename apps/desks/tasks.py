"""Celery tasks for the desk domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from .models import DeskBooking
from .services import send_desk_notifications

logger = logging.getLogger(__name__)


@shared_task(name="desks.resend_pending_confirmations")
def resend_pending_desk_confirmations() -> dict[str, int]:
    """
    Retry confirmation emails that failed when the booking was made.

    Only bookings for today or later are retried; a confirmation for a
    day that has passed is of no use to anyone.

    Returns:
        dict: {"sent": delivered now, "failed": still pending}
    """
    batch_size = getattr(settings, "NOTIFICATION_RETRY_BATCH", 50)
    today = timezone.localdate()
    pending = (
        DeskBooking.objects.pending_notification()
        .filter(booking_date__gte=today)
        .select_related("desk")
        .order_by("booking_date", "created_at")[:batch_size]
    )

    sent_count = 0
    failed_count = 0
    for booking in pending:
        if send_desk_notifications(booking):
            sent_count += 1
        else:
            failed_count += 1

    if sent_count or failed_count:
        logger.info(f"Desk confirmation retry: {sent_count} sent, {failed_count} still pending")

    return {"sent": sent_count, "failed": failed_count}
