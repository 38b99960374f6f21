"""API views for the desk domain."""

from __future__ import annotations

from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import DeskBookingFilterSet, DeskFilterSet
from .models import Desk, DeskBooking
from .serializers import DeskBookingCreateSerializer, DeskBookingSerializer, DeskSerializer
from .services import cancel_desk_booking, is_desk_available


class DeskAvailabilityQuerySerializer(serializers.Serializer):
    desk_id = serializers.IntegerField()
    date = serializers.DateField()


class DeskViewSet(viewsets.ModelViewSet):
    """CRUD for desks plus lookup by number and per-day availability."""

    queryset = Desk.objects.all()
    lookup_value_regex = r"\d+"
    serializer_class = DeskSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = DeskFilterSet

    @action(detail=False, methods=["get"], url_path=r"number/(?P<desk_number>[^/]+)", url_name="by-number")
    def by_number(self, request, desk_number=None):  # type: ignore
        desk = get_object_or_404(Desk, desk_number=desk_number)
        return Response(self.get_serializer(desk).data)

    @action(detail=False, methods=["get"])
    def available(self, request):  # type: ignore
        query = DeskAvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        desk_id = query.validated_data["desk_id"]
        booking_date = query.validated_data["date"]
        get_object_or_404(Desk, pk=desk_id)
        return Response(
            {
                "desk_id": desk_id,
                "date": booking_date,
                "available": is_desk_available(desk_id, booking_date),
            }
        )


class DeskBookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Desk bookings: create runs the booking workflow, delete cancels."""

    queryset = DeskBooking.objects.select_related("desk").all()
    lookup_value_regex = r"\d+"
    filter_backends = [DjangoFilterBackend]
    filterset_class = DeskBookingFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return DeskBookingCreateSerializer
        return DeskBookingSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = serializer.save()
        read_serializer = DeskBookingSerializer(booking, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def destroy(self, request, pk=None, *args, **kwargs):  # type: ignore
        cancel_desk_booking(pk)
        return Response({"detail": "Booking cancelled successfully"}, status=status.HTTP_200_OK)
