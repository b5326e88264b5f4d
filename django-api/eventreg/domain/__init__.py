from eventreg.domain.models import Event, EventDraft, Registration, RegistrationDraft
from eventreg.domain.value_objects import Capacity, EventId

__all__ = [
    "Event",
    "EventDraft",
    "Registration",
    "RegistrationDraft",
    "EventId",
    "Capacity",
]
