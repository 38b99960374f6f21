import pytest
from rest_framework.exceptions import ValidationError

from apps.desks.models import Desk
from apps.rooms.models import MeetingRoom
from shared.infrastructure.filters import filter_by_status_choice, parse_status_choice


def test_parse_status_is_case_insensitive():
    assert parse_status_choice("booked", Desk.Status) == "BOOKED"
    with pytest.raises(ValidationError):
        parse_status_choice("broken", MeetingRoom.Status)


@pytest.mark.django_db
def test_filter_goes_through_by_status():
    Desk.objects.create(desk_number="F1-01", status=Desk.Status.BOOKED)
    Desk.objects.create(desk_number="F1-02")

    booked = filter_by_status_choice(Desk.objects.all(), "Booked", Desk.Status)
    assert [desk.desk_number for desk in booked] == ["F1-01"]
    assert filter_by_status_choice(Desk.objects.all(), "", Desk.Status).count() == 2
