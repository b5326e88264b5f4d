"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from eventreg.domain import Event, EventDraft, EventId, Registration
from eventreg.domain.errors import EventNotFoundError, InvalidEventIdError
from eventreg.stores.interfaces import EventStore, RegistrationStore


def parse_event_id(event_id: str) -> int:
    """Parse a path or form value into an event id.

    Raises:
        InvalidEventIdError: If the value is not a positive integer.
    """
    try:
        return EventId.from_string(event_id).value
    except ValueError as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(parsed)
        return event

    def add_event(self, draft: EventDraft) -> Event:
        """Add an event to the catalog."""
        return self._store.add_event(draft)

    def get_registrations_for_event(
        self, event_id: str, ledger: RegistrationStore
    ) -> list[Registration]:
        """Return registrations for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        return ledger.list_registrations_for_event(event.id)
