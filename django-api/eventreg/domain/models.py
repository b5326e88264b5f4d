"""Domain models representing in-memory session state.

These are pure domain objects with no API input rules.
Field-level form validation lives in handlers/serializers.py.
"""

from dataclasses import dataclass
from datetime import datetime

from eventreg.domain.value_objects import Capacity


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: int
    name: str
    location: str
    date: datetime
    total_seats: int
    available_seats: int

    def __post_init__(self) -> None:
        if not 0 <= self.available_seats <= self.total_seats:
            raise ValueError("available_seats must lie within [0, total_seats]")

    @property
    def attendee_count(self) -> int:
        return self.total_seats - self.available_seats

    @property
    def is_full(self) -> bool:
        return self.available_seats == 0


@dataclass(frozen=True)
class EventDraft:
    """Values for an event that has not been added to a catalog yet."""

    name: str
    location: str
    date: datetime
    total_seats: int

    def __post_init__(self) -> None:
        Capacity(self.total_seats)


@dataclass(frozen=True)
class Registration:
    """Domain representation of a Registration."""

    id: int
    name: str
    email: str
    event_id: int
    registration_date: datetime


@dataclass(frozen=True)
class RegistrationDraft:
    """Submitted registration form values, already validated by the caller."""

    name: str
    email: str
    event_id: int
