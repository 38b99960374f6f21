"""Desk domain models."""

from __future__ import annotations

from django.db import models  # type: ignore


class DeskQuerySet(models.QuerySet):
    def by_status(self, status: str) -> "DeskQuerySet":
        return self.filter(status=status)

    def by_department(self, department: str) -> "DeskQuerySet":
        return self.filter(department=department)

    def vacant_in_department(self, department: str) -> "DeskQuerySet":
        return self.filter(status=Desk.Status.VACANT, department=department)

    def by_occupant(self, occupant_name: str) -> "DeskQuerySet":
        return self.filter(occupant_name=occupant_name)


class Desk(models.Model):
    """A bookable desk on an office floor."""

    class Status(models.TextChoices):
        VACANT = "VACANT", "Vacant"
        BOOKED = "BOOKED", "Booked"

    desk_number = models.CharField(max_length=50, unique=True)
    department = models.CharField(max_length=50, blank=True)
    x_position = models.IntegerField(null=True, blank=True)
    y_position = models.IntegerField(null=True, blank=True)
    floor = models.IntegerField(null=True, blank=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.VACANT)
    occupant_name = models.CharField(max_length=100, null=True, blank=True)
    occupant_department = models.CharField(max_length=50, null=True, blank=True)

    objects = DeskQuerySet.as_manager()

    class Meta:
        ordering = ["floor", "desk_number"]
        indexes = [
            models.Index(fields=["status", "department"], name="desk_status_department_idx"),
        ]

    def __str__(self) -> str:
        return f"Desk {self.desk_number}"

    def occupy(self, occupant_name: str, occupant_department: str) -> None:
        self.status = self.Status.BOOKED
        self.occupant_name = occupant_name
        self.occupant_department = occupant_department

    def release(self) -> None:
        self.status = self.Status.VACANT
        self.occupant_name = None
        self.occupant_department = None


class DeskBookingQuerySet(models.QuerySet):
    def for_desk(self, desk) -> "DeskBookingQuerySet":
        return self.filter(desk=desk)

    def on_date(self, booking_date) -> "DeskBookingQuerySet":
        return self.filter(booking_date=booking_date)

    def for_desk_on_date(self, desk, booking_date) -> "DeskBookingQuerySet":
        return self.filter(desk=desk, booking_date=booking_date)

    def for_email(self, email: str) -> "DeskBookingQuerySet":
        return self.filter(email__iexact=email)

    def for_friend_email(self, friend_email: str) -> "DeskBookingQuerySet":
        return self.filter(friend_email__iexact=friend_email)

    def for_department(self, department: str) -> "DeskBookingQuerySet":
        return self.filter(department=department)

    def pending_notification(self) -> "DeskBookingQuerySet":
        """Bookings with a confirmation or friend notification still undelivered."""
        friend_pending = models.Q(is_for_friend=True, friend_email_sent=False) & ~models.Q(friend_email="")
        return self.filter(models.Q(email_sent=False) | friend_pending)


class DeskBooking(models.Model):
    """A whole-day reservation of a desk, optionally made on behalf of a friend."""

    desk = models.ForeignKey(Desk, on_delete=models.CASCADE, related_name="bookings")
    booker_name = models.CharField(max_length=100)
    department = models.CharField(max_length=50)
    designation = models.CharField(max_length=50)
    contact = models.CharField(max_length=20)
    email = models.EmailField(max_length=50)
    is_for_friend = models.BooleanField(default=False)
    friend_name = models.CharField(max_length=100, blank=True)
    friend_email = models.EmailField(max_length=50, blank=True)
    booking_date = models.DateField()
    # Booker confirmation and friend notification are delivered and retried separately.
    email_sent = models.BooleanField(default=False)
    friend_email_sent = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = DeskBookingQuerySet.as_manager()

    class Meta:
        ordering = ["-booking_date", "-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["desk", "booking_date"], name="desk_booking_unique_per_day"),
        ]
        indexes = [
            models.Index(fields=["booking_date"], name="desk_booking_date_idx"),
            models.Index(fields=["email"], name="desk_booking_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.desk.desk_number} on {self.booking_date} for {self.occupant_name}"

    @property
    def needs_friend_notification(self) -> bool:
        return self.is_for_friend and bool(self.friend_email) and not self.friend_email_sent

    @property
    def occupant_name(self) -> str:
        """Who actually sits at the desk."""
        return self.friend_name if self.is_for_friend else self.booker_name
