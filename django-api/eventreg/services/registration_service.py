"""Registration service - the checks a form submission goes through."""

import logging

from eventreg.domain import Registration, RegistrationDraft
from eventreg.domain.errors import (
    AlreadyRegisteredError,
    EventFullError,
    EventNotFoundError,
)
from eventreg.stores.interfaces import EventStore, RegistrationStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registering people to events."""

    def __init__(self, catalog: EventStore, ledger: RegistrationStore) -> None:
        self._catalog = catalog
        self._ledger = ledger

    def list_registrations(self) -> list[Registration]:
        return self._ledger.list_registrations()

    def is_registered(self, email: str, event_id: int) -> bool:
        return self._ledger.is_registered(email, event_id)

    def register(self, draft: RegistrationDraft) -> Registration:
        """Register for an event and return the new registration.

        Raises:
            EventNotFoundError: If the selected event does not exist.
            AlreadyRegisteredError: If the email already holds a seat.
            EventFullError: If no seat is left.
        """
        with self._ledger.lock:
            if self._catalog.get_event(draft.event_id) is None:
                raise EventNotFoundError(draft.event_id)
            if self._ledger.is_registered(draft.email, draft.event_id):
                logger.info("Duplicate registration refused for event %s", draft.event_id)
                raise AlreadyRegisteredError(draft.event_id)
            if not self._ledger.register(draft):
                raise EventFullError(draft.event_id)
            return self._ledger.list_registrations()[-1]
