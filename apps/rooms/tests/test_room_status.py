from datetime import datetime, time, timedelta
from unittest import mock

import pytest

from apps.rooms.models import MeetingRoom, MeetingRoomBooking
from apps.rooms.status import derive_room_status, refresh_room_status_cache, room_status_for_date

TODAY = datetime(2030, 5, 15).date()
NOW = datetime(2030, 5, 15, 12, 0)


@pytest.fixture
def room():
    return MeetingRoom.objects.create(room_number="A101", room_name="Executive Suite", capacity=12)


def _book(room, day, start, end):
    return MeetingRoomBooking.objects.create(
        meeting_room=room,
        booker_name="Alice Smith",
        designation="Manager",
        contact="+10000000001",
        email="alice@example.com",
        booking_date=day,
        start_time=start,
        end_time=end,
    )


@pytest.mark.django_db
def test_elapsed_booking_today_leaves_room_vacant(room):
    _book(room, TODAY, time(9), time(10))

    assert room_status_for_date(room, TODAY, now=NOW) == MeetingRoom.Status.VACANT


@pytest.mark.django_db
def test_booking_still_running_today_marks_room_booked(room):
    _book(room, TODAY, time(11), time(13))

    assert room_status_for_date(room, TODAY, now=NOW) == MeetingRoom.Status.BOOKED


@pytest.mark.django_db
def test_future_day_with_any_booking_is_booked(room):
    tomorrow = TODAY + timedelta(days=1)
    _book(room, tomorrow, time(8), time(9))

    assert derive_room_status(room, tomorrow, now=NOW) == MeetingRoom.Status.BOOKED
    assert derive_room_status(room, tomorrow + timedelta(days=1), now=NOW) == MeetingRoom.Status.VACANT


@pytest.mark.django_db
def test_past_day_is_always_vacant(room):
    yesterday = TODAY - timedelta(days=1)
    _book(room, yesterday, time(8), time(23))

    assert derive_room_status(room, yesterday, now=NOW) == MeetingRoom.Status.VACANT
    assert derive_room_status(room, yesterday, time(9), now=NOW) == MeetingRoom.Status.VACANT


@pytest.mark.django_db
def test_status_at_time_uses_half_open_slot(room):
    tomorrow = TODAY + timedelta(days=1)
    _book(room, tomorrow, time(10), time(11))

    assert derive_room_status(room, tomorrow, time(10), now=NOW) == MeetingRoom.Status.BOOKED
    assert derive_room_status(room, tomorrow, time(10, 30), now=NOW) == MeetingRoom.Status.BOOKED
    assert derive_room_status(room, tomorrow, time(11), now=NOW) == MeetingRoom.Status.VACANT
    assert derive_room_status(room, tomorrow, time(9, 59), now=NOW) == MeetingRoom.Status.VACANT


@pytest.mark.django_db
def test_earlier_time_today_is_vacant(room):
    _book(room, TODAY, time(9), time(13))

    assert derive_room_status(room, TODAY, time(10), now=NOW) == MeetingRoom.Status.VACANT
    assert derive_room_status(room, TODAY, time(12, 30), now=NOW) == MeetingRoom.Status.BOOKED


@pytest.mark.django_db
def test_lookup_errors_fail_closed_to_vacant(room):
    tomorrow = TODAY + timedelta(days=1)
    _book(room, tomorrow, time(10), time(11))

    with mock.patch.object(MeetingRoomBooking.objects, "for_room_on_date", side_effect=RuntimeError("db gone")):
        assert derive_room_status(room, tomorrow, now=NOW) == MeetingRoom.Status.VACANT
        assert derive_room_status(room, tomorrow, time(10, 30), now=NOW) == MeetingRoom.Status.VACANT


@pytest.mark.django_db
def test_refresh_writes_derived_status(room):
    idle = MeetingRoom.objects.create(room_number="B201", room_name="Focus Room", capacity=4, status=MeetingRoom.Status.BOOKED)
    _book(room, TODAY, time(11), time(13))

    changed = refresh_room_status_cache(now=NOW)

    assert changed == 2
    room.refresh_from_db()
    idle.refresh_from_db()
    assert room.status == MeetingRoom.Status.BOOKED
    assert idle.status == MeetingRoom.Status.VACANT
    assert refresh_room_status_cache(now=NOW) == 0
