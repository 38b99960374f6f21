from datetime import timedelta
from unittest import mock

import pytest
from django.core import mail
from django.utils import timezone

from apps.desks.models import Desk, DeskBooking
from apps.desks.services import DeskBookingRequest, book_desk
from apps.desks.tasks import resend_pending_desk_confirmations
from shared.domain.exceptions import NotificationError


def _booking(desk, booking_date, **extra):
    data = {
        "desk": desk,
        "booker_name": "Alice Smith",
        "department": "Engineering",
        "designation": "Developer",
        "contact": "+10000000001",
        "email": "alice@example.com",
        "booking_date": booking_date,
    }
    data.update(extra)
    return DeskBooking.objects.create(**data)


@pytest.mark.django_db
def test_resend_delivers_pending_upcoming_confirmations():
    desk = Desk.objects.create(desk_number="F1-01")
    today = timezone.localdate()
    upcoming = _booking(desk, today + timedelta(days=2))
    _booking(desk, today - timedelta(days=3))
    _booking(desk, today + timedelta(days=5), email_sent=True)

    result = resend_pending_desk_confirmations()

    assert result == {"sent": 1, "failed": 0}
    upcoming.refresh_from_db()
    assert upcoming.email_sent is True
    assert len(mail.outbox) == 1


@pytest.mark.django_db
def test_resend_counts_failures_and_leaves_them_pending():
    desk = Desk.objects.create(desk_number="F1-02")
    booking = _booking(desk, timezone.localdate())

    with mock.patch("apps.desks.services.get_notifier") as get_notifier:
        get_notifier.return_value.send_desk_confirmation.side_effect = RuntimeError("boom")
        result = resend_pending_desk_confirmations()

    assert result == {"sent": 0, "failed": 1}
    booking.refresh_from_db()
    assert booking.email_sent is False


@pytest.mark.django_db
def test_resend_only_retries_the_failed_friend_notification():
    desk = Desk.objects.create(desk_number="F1-03")
    failing_friend = mock.Mock()
    failing_friend.send_desk_friend_notification.side_effect = NotificationError("mailbox full")
    booking = book_desk(
        DeskBookingRequest(
            desk_id=desk.pk,
            booker_name="Alice Smith",
            department="Engineering",
            designation="Developer",
            contact="+10000000001",
            email="alice@example.com",
            booking_date=timezone.localdate() + timedelta(days=1),
            is_for_friend=True,
            friend_name="Bob Jones",
            friend_email="bob@example.com",
        ),
        notifier=failing_friend,
    )
    booking.refresh_from_db()
    assert (booking.email_sent, booking.friend_email_sent) == (True, False)

    with mock.patch("apps.desks.services.get_notifier", return_value=failing_friend):
        for _ in range(3):
            assert resend_pending_desk_confirmations() == {"sent": 0, "failed": 1}
    failing_friend.send_desk_confirmation.assert_called_once()
    assert failing_friend.send_desk_friend_notification.call_count == 4

    assert resend_pending_desk_confirmations() == {"sent": 1, "failed": 0}
    assert [message.to for message in mail.outbox] == [["bob@example.com"]]
    booking.refresh_from_db()
    assert booking.friend_email_sent is True
    assert resend_pending_desk_confirmations() == {"sent": 0, "failed": 0}
