"""Serializers for form validation and for rendering domain models.

Request serializers own the field rules the stores trust callers to apply.
"""

from rest_framework import serializers

from eventreg.domain import EventDraft, RegistrationDraft

NAME_LENGTH_MESSAGE = "Name must be between 2 and 100 characters"
INVALID_EVENT_MESSAGE = "Please select a valid event"


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    location = serializers.CharField()
    date = serializers.DateTimeField()
    total_seats = serializers.IntegerField()
    available_seats = serializers.IntegerField()
    attendee_count = serializers.IntegerField()
    is_full = serializers.BooleanField()


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    event_id = serializers.IntegerField()
    registration_date = serializers.DateTimeField()


class EventDraftSerializer(serializers.Serializer):
    """Validates a new event submission."""

    name = serializers.CharField(max_length=200)
    location = serializers.CharField(max_length=200)
    date = serializers.DateTimeField()
    total_seats = serializers.IntegerField(min_value=0)

    def to_draft(self) -> EventDraft:
        return EventDraft(**self.validated_data)


class RegistrationRequestSerializer(serializers.Serializer):
    """Validates the registration form."""

    name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            "required": "Name is required",
            "blank": "Name is required",
            "min_length": NAME_LENGTH_MESSAGE,
            "max_length": NAME_LENGTH_MESSAGE,
        },
    )
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "invalid": "Invalid email address",
        },
    )
    event_id = serializers.IntegerField(
        min_value=1,
        error_messages={
            "required": "Please select an event",
            "invalid": INVALID_EVENT_MESSAGE,
            "min_value": INVALID_EVENT_MESSAGE,
        },
    )

    def to_draft(self) -> RegistrationDraft:
        return RegistrationDraft(**self.validated_data)
