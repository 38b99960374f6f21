from io import StringIO

import pytest
from django.core.management import call_command

from apps.desks.models import Desk
from apps.rooms.models import MeetingRoom


@pytest.mark.django_db
def test_seed_workspace_creates_floor_plan():
    out = StringIO()
    call_command("seed_workspace", stdout=out)

    assert MeetingRoom.objects.count() == 6
    assert Desk.objects.count() == 36
    assert Desk.objects.filter(floor=1, department="Engineering").count() == 8
    assert Desk.objects.filter(floor=3, department="Sales").count() == 7

    desk = Desk.objects.get(desk_number="F2-07")
    assert (desk.department, desk.x_position, desk.y_position) == ("HR", 350, 200)

    room = MeetingRoom.objects.get(room_number="A101")
    assert room.room_name == "Executive Suite"
    assert room.capacity == 12
    assert room.has_projector and room.has_video_conference
    assert "Created 36 desks" in out.getvalue()


@pytest.mark.django_db
def test_seed_workspace_is_idempotent():
    call_command("seed_workspace", stdout=StringIO())
    out = StringIO()
    call_command("seed_workspace", stdout=out)

    assert Desk.objects.count() == 36
    assert MeetingRoom.objects.count() == 6
    assert "already present" in out.getvalue()
