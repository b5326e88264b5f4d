"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from eventreg.domain import Event, EventDraft, Registration, RegistrationDraft
from eventreg.signals import Observer, Subscription


class EventStore(ABC):
    """Interface for the event catalog."""

    @property
    @abstractmethod
    def lock(self):
        """Re-entrant lock guarding the catalog, shared with its ledger."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def get_event(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def reserve_seats(self, event_id: int, count: int) -> bool:
        """Take `count` seats from an event.

        Returns False without any change when the count is not positive,
        the event does not exist or too few seats are left.
        """
        ...

    @abstractmethod
    def add_event(self, draft: EventDraft) -> Event:
        """Store a new event with all seats available and return it."""
        ...

    @abstractmethod
    def subscribe(self, callback: Observer) -> Subscription:
        """Register an observer called after every committed change."""
        ...


class RegistrationStore(ABC):
    """Interface for the registration ledger."""

    @property
    @abstractmethod
    def lock(self):
        """The catalog lock; hold it to run several ledger calls as one step."""
        ...

    @abstractmethod
    def list_registrations(self) -> list[Registration]:
        """Return all registrations in insertion order."""
        ...

    @abstractmethod
    def list_registrations_for_event(self, event_id: int) -> list[Registration]:
        """Return the registrations for one event in insertion order."""
        ...

    @abstractmethod
    def is_registered(self, email: str, event_id: int) -> bool:
        """Check case-insensitively if an email is registered for an event."""
        ...

    @abstractmethod
    def register(self, draft: RegistrationDraft) -> bool:
        """Reserve one seat and record a registration.

        Returns False and records nothing when the seat reservation fails.
        """
        ...

    @abstractmethod
    def subscribe(self, callback: Observer) -> Subscription:
        """Register an observer called after every committed change."""
        ...
