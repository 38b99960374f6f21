from datetime import time, timedelta

import pytest
from django.core import mail
from django.utils import timezone

from apps.rooms.models import MeetingRoom, MeetingRoomBooking
from apps.rooms.tasks import refresh_meeting_room_statuses, resend_pending_room_confirmations


@pytest.mark.django_db
def test_refresh_task_resets_stale_booked_rooms():
    room = MeetingRoom.objects.create(room_number="C301", room_name="Conference Hall", capacity=20, status=MeetingRoom.Status.BOOKED)

    assert refresh_meeting_room_statuses() == 1
    room.refresh_from_db()
    assert room.status == MeetingRoom.Status.VACANT


@pytest.mark.django_db
def test_resend_room_confirmations():
    room = MeetingRoom.objects.create(room_number="C302", room_name="Training Room", capacity=16)
    booking = MeetingRoomBooking.objects.create(
        meeting_room=room,
        booker_name="Alice Smith",
        designation="Manager",
        contact="+10000000001",
        email="alice@example.com",
        booking_date=timezone.localdate() + timedelta(days=1),
        start_time=time(14),
        end_time=time(15),
    )

    assert resend_pending_room_confirmations() == {"sent": 1, "failed": 0}
    booking.refresh_from_db()
    assert booking.email_sent is True
    assert mail.outbox[0].to == ["alice@example.com"]


def test_beat_schedule_uses_refresh_setting(settings):
    from config.celery import app

    entry = app.conf.beat_schedule["refresh-meeting-room-statuses"]
    assert entry["task"] == "rooms.refresh_meeting_room_statuses"
    assert entry["schedule"] == settings.ROOM_STATUS_REFRESH_SECONDS
