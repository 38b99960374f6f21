"""API views for the meeting room domain."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.exceptions import ResourceNotFoundError

from .filters import MeetingRoomBookingFilterSet, MeetingRoomFilterSet
from .models import MeetingRoom, MeetingRoomBooking
from .serializers import (
    MeetingRoomBookingCreateSerializer,
    MeetingRoomBookingSerializer,
    MeetingRoomSerializer,
    RoomStatusQuerySerializer,
    RoomTimeSlotSerializer,
)
from .services import cancel_meeting_room_booking, is_room_available
from .status import derive_room_status


class RoomAvailabilityQuerySerializer(RoomTimeSlotSerializer):
    room_id = serializers.IntegerField()


class MeetingRoomViewSet(viewsets.ModelViewSet):
    """CRUD for meeting rooms plus search, availability and derived status."""

    queryset = MeetingRoom.objects.all()
    lookup_value_regex = r"\d+"
    serializer_class = MeetingRoomSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = MeetingRoomFilterSet

    def get_serializer_context(self):  # type: ignore
        context = super().get_serializer_context()
        if self.action in {"list", "retrieve", "search"} and "date" in self.request.query_params:
            query = RoomStatusQuerySerializer(data=self.request.query_params)
            query.is_valid(raise_exception=True)
            context["status_date"] = query.validated_data["date"]
            context["status_time"] = query.validated_data.get("time")
        return context

    @action(detail=False, methods=["get"])
    def search(self, request):  # type: ignore
        name = request.query_params.get("name", "")
        rooms = MeetingRoom.objects.search_by_name(name)
        return Response(self.get_serializer(rooms, many=True).data)

    @action(detail=False, methods=["get"])
    def available(self, request):  # type: ignore
        query = RoomAvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data
        if not MeetingRoom.objects.filter(pk=data["room_id"]).exists():
            raise ResourceNotFoundError("Meeting Room", "id", data["room_id"])
        return Response(
            {
                "room_id": data["room_id"],
                "date": data["date"],
                "start_time": data["start_time"].strftime("%H:%M"),
                "end_time": data["end_time"].strftime("%H:%M"),
                "available": is_room_available(data["room_id"], data["date"], data["start_time"], data["end_time"]),
            }
        )

    @action(detail=True, methods=["get"], url_path="status", url_name="status")
    def room_status(self, request, pk=None):  # type: ignore
        room = self.get_object()
        query = RoomStatusQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data["date"]
        at = query.validated_data.get("time")
        return Response(
            {
                "room_id": room.pk,
                "date": day,
                "time": at.strftime("%H:%M") if at else None,
                "status": derive_room_status(room, day, at),
            }
        )


class MeetingRoomBookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Meeting room bookings: create runs the booking workflow, delete cancels."""

    queryset = MeetingRoomBooking.objects.select_related("meeting_room").all()
    lookup_value_regex = r"\d+"
    filter_backends = [DjangoFilterBackend]
    filterset_class = MeetingRoomBookingFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return MeetingRoomBookingCreateSerializer
        return MeetingRoomBookingSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = serializer.save()
        read_serializer = MeetingRoomBookingSerializer(booking, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def destroy(self, request, pk=None, *args, **kwargs):  # type: ignore
        cancel_meeting_room_booking(pk)
        return Response({"detail": "Booking cancelled successfully"}, status=status.HTTP_200_OK)
