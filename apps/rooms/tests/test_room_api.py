"""Integration tests for meeting room API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.rooms.models import MeetingRoom, MeetingRoomBooking


class MeetingRoomAPITests(APITestCase):
    """Covers room search, slot booking conflicts, derived status and cancellation."""

    def setUp(self) -> None:
        self.room = MeetingRoom.objects.create(
            room_number="A101",
            room_name="Executive Suite",
            capacity=12,
            has_projector=True,
            has_video_conference=True,
        )
        self.huddle = MeetingRoom.objects.create(room_number="B202", room_name="Quick Huddle", capacity=3)
        self.booking_date = timezone.localdate() + timedelta(days=1)
        self.bookings_url = reverse("meeting-room-booking-list")

    def _payload(self, start: str, end: str, **overrides) -> dict:
        payload = {
            "meeting_room_id": self.room.pk,
            "booker_name": "Alice Smith",
            "designation": "Manager",
            "contact": "+10000000001",
            "email": "alice@example.com",
            "booking_date": str(self.booking_date),
            "start_time": start,
            "end_time": end,
        }
        payload.update(overrides)
        return payload

    def _status(self, room: MeetingRoom, **params) -> str:
        response = self.client.get(reverse("meeting-room-status", kwargs={"pk": room.pk}), params)
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        return response.data["status"]

    def test_slot_booking_conflicts(self) -> None:
        response = self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["start_time"], "10:00")
        self.assertEqual(response.data["room_number"], "A101")
        self.assertTrue(response.data["email_sent"])

        inside = self.client.post(self.bookings_url, self._payload("10:30", "10:45"), format="json")
        self.assertEqual(inside.status_code, status.HTTP_409_CONFLICT)

        adjacent_after = self.client.post(self.bookings_url, self._payload("11:00", "12:00"), format="json")
        self.assertEqual(adjacent_after.status_code, status.HTTP_409_CONFLICT)

        adjacent_before = self.client.post(self.bookings_url, self._payload("09:00", "10:00"), format="json")
        self.assertEqual(adjacent_before.status_code, status.HTTP_201_CREATED, adjacent_before.data)

        self.assertEqual(MeetingRoomBooking.objects.count(), 2)

    def test_status_at_time_follows_bookings(self) -> None:
        self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")
        day = str(self.booking_date)

        self.assertEqual(self._status(self.room, date=day, time="10:30"), MeetingRoom.Status.BOOKED)
        self.assertEqual(self._status(self.room, date=day, time="11:00"), MeetingRoom.Status.VACANT)
        self.assertEqual(self._status(self.room, date=day), MeetingRoom.Status.BOOKED)
        self.assertEqual(self._status(self.huddle, date=day), MeetingRoom.Status.VACANT)

    def test_list_reports_derived_status_for_date(self) -> None:
        self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")

        response = self.client.get(reverse("meeting-room-list"), {"date": str(self.booking_date)})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        statuses = {room["room_number"]: room["status"] for room in response.data}
        self.assertEqual(statuses, {"A101": "BOOKED", "B202": "VACANT"})

        stored = self.client.get(reverse("meeting-room-detail", kwargs={"pk": self.room.pk}))
        self.assertEqual(stored.data["status"], MeetingRoom.Status.VACANT)

    def test_status_requires_date(self) -> None:
        response = self.client.get(reverse("meeting-room-status", kwargs={"pk": self.room.pk}))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_status_of_unknown_room_returns_404(self) -> None:
        response = self.client.get(reverse("meeting-room-status", kwargs={"pk": 99999}), {"date": str(self.booking_date)})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_search_by_name(self) -> None:
        response = self.client.get(reverse("meeting-room-search"), {"name": "suite"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([r["room_number"] for r in response.data], ["A101"])

    def test_list_filters(self) -> None:
        response = self.client.get(reverse("meeting-room-list"), {"has_projector": "true"})
        self.assertEqual([r["room_number"] for r in response.data], ["A101"])

        response = self.client.get(reverse("meeting-room-list"), {"status": "vacant"})
        self.assertEqual(len(response.data), 2)

    def test_availability(self) -> None:
        self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")
        url = reverse("meeting-room-available")
        params = {"room_id": self.room.pk, "date": str(self.booking_date)}

        response = self.client.get(url, {**params, "start_time": "10:15", "end_time": "10:45"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["available"])

        response = self.client.get(url, {**params, "start_time": "14:00", "end_time": "15:00"})
        self.assertTrue(response.data["available"])

        response = self.client.get(url, {**params, "room_id": 99999, "start_time": "14:00", "end_time": "15:00"})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_end_before_start_is_rejected(self) -> None:
        response = self.client.post(self.bookings_url, self._payload("11:00", "10:00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("end_time", response.data)

    def test_booking_unknown_room_returns_404(self) -> None:
        response = self.client.post(self.bookings_url, self._payload("10:00", "11:00", meeting_room_id=99999), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["detail"], "Meeting Room not found with id: '99999'")

    def test_cancel_frees_slot(self) -> None:
        created = self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")

        response = self.client.delete(reverse("meeting-room-booking-detail", kwargs={"pk": created.data["id"]}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        again = self.client.post(self.bookings_url, self._payload("10:30", "10:45"), format="json")
        self.assertEqual(again.status_code, status.HTTP_201_CREATED)

        missing = self.client.delete(reverse("meeting-room-booking-detail", kwargs={"pk": created.data["id"]}))
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_bookings_filtered_by_room(self) -> None:
        self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")
        self.client.post(
            self.bookings_url,
            self._payload("10:00", "11:00", meeting_room_id=self.huddle.pk, email="bob@example.com"),
            format="json",
        )

        response = self.client.get(self.bookings_url, {"room_id": self.huddle.pk})

        self.assertEqual([b["email"] for b in response.data], ["bob@example.com"])

    def test_status_filter_with_date_matches_reported_status(self) -> None:
        self.client.post(self.bookings_url, self._payload("10:00", "11:00"), format="json")
        url = reverse("meeting-room-list")
        day = str(self.booking_date)

        booked = self.client.get(url, {"status": "booked", "date": day})
        self.assertEqual(booked.status_code, status.HTTP_200_OK, booked.data)
        self.assertEqual([(r["room_number"], r["status"]) for r in booked.data], [("A101", "BOOKED")])

        vacant = self.client.get(url, {"status": "vacant", "date": day})
        self.assertEqual([(r["room_number"], r["status"]) for r in vacant.data], [("B202", "VACANT")])

        at_noon = self.client.get(url, {"status": "booked", "date": day, "time": "12:00"})
        self.assertEqual(at_noon.data, [])

        stored = self.client.get(url, {"status": "booked"})
        self.assertEqual(stored.data, [])
