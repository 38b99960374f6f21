"""Populate an empty database with the sample floor plan and meeting rooms."""

from django.core.management.base import BaseCommand  # type: ignore
from django.db import transaction  # type: ignore

from apps.desks.models import Desk
from apps.rooms.models import MeetingRoom

MEETING_ROOMS = [
    # room_number, room_name, capacity, has_projector, has_video_conference
    ("A101", "Executive Suite", 12, True, True),
    ("A102", "Brainstorm Room", 8, True, False),
    ("B201", "Focus Room", 4, False, False),
    ("C301", "Conference Hall", 20, True, True),
    ("C302", "Training Room", 16, True, True),
    ("B202", "Quick Huddle", 3, False, False),
]

# floor, desk count, y position, (department of the first N desks, N), remaining department
FLOORS = [
    (1, 12, 100, ("Engineering", 8), "Marketing"),
    (2, 10, 200, ("Finance", 6), "HR"),
    (3, 14, 300, ("Product", 7), "Sales"),
]


def build_desks() -> list[Desk]:
    desks = []
    for floor, count, y_position, (first_department, split), other_department in FLOORS:
        for i in range(1, count + 1):
            desks.append(
                Desk(
                    desk_number=f"F{floor}-{i:02d}",
                    department=first_department if i <= split else other_department,
                    x_position=i * 50,
                    y_position=y_position,
                    floor=floor,
                    status=Desk.Status.VACANT,
                )
            )
    return desks


def build_meeting_rooms() -> list[MeetingRoom]:
    return [
        MeetingRoom(
            room_number=number,
            room_name=name,
            capacity=capacity,
            has_projector=projector,
            has_video_conference=video,
            status=MeetingRoom.Status.VACANT,
        )
        for number, name, capacity, projector, video in MEETING_ROOMS
    ]


class Command(BaseCommand):
    help = "Seeds sample desks and meeting rooms; tables that already hold data are left untouched"

    @transaction.atomic
    def handle(self, *args, **options):
        if MeetingRoom.objects.exists():
            self.stdout.write("Meeting rooms already present, skipping")
        else:
            rooms = MeetingRoom.objects.bulk_create(build_meeting_rooms())
            self.stdout.write(self.style.SUCCESS(f"Created {len(rooms)} meeting rooms"))

        if Desk.objects.exists():
            self.stdout.write("Desks already present, skipping")
        else:
            desks = Desk.objects.bulk_create(build_desks())
            self.stdout.write(self.style.SUCCESS(f"Created {len(desks)} desks"))
