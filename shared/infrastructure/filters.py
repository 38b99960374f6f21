"""Filter helpers shared by the desk and meeting room listings."""

from __future__ import annotations

from rest_framework.exceptions import ValidationError  # type: ignore


def parse_status_choice(value, choices) -> str:  # type: ignore
    """Upper-case ``value`` and check it against a TextChoices class."""
    status = str(value).upper()
    if status not in choices.values:
        raise ValidationError({"status": f"Unknown status '{value}'."})
    return status


def filter_by_status_choice(queryset, value, choices):  # type: ignore
    """Case-insensitive status filter through the queryset's ``by_status``."""
    if not value:
        return queryset
    return queryset.by_status(parse_status_choice(value, choices))
