"""In-memory implementation of the event and registration stores.

One catalog/ledger pair lives for one user session. Records are immutable;
the catalog swaps in a new Event whenever seats change, so the catalog stays
the only writer of `available_seats`.
"""

import dataclasses
import logging
import threading
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from eventreg.domain import Event, EventDraft, Registration, RegistrationDraft
from eventreg.signals import ChangeNotifier, Observer, Subscription
from eventreg.stores.interfaces import EventStore, RegistrationStore
from eventreg.stores.seed import SAMPLE_EVENTS

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemoryEventCatalog(EventStore):
    """Event list plus seat accounting, held in process memory."""

    def __init__(self, seed: Iterable[EventDraft] = SAMPLE_EVENTS) -> None:
        self._events: list[Event] = []
        self._next_id = 1
        self._lock = threading.RLock()
        self._notifier = ChangeNotifier()
        for draft in seed:
            self._append(draft)

    @property
    def lock(self):
        return self._lock

    def _append(self, draft: EventDraft) -> Event:
        event = Event(
            id=self._next_id,
            name=draft.name,
            location=draft.location,
            date=draft.date,
            total_seats=draft.total_seats,
            available_seats=draft.total_seats,
        )
        self._next_id += 1
        self._events.append(event)
        return event

    def _index_of(self, event_id: int) -> int | None:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events)

    def get_event(self, event_id: int) -> Event | None:
        with self._lock:
            index = self._index_of(event_id)
            return None if index is None else self._events[index]

    def reserve_seats(self, event_id: int, count: int) -> bool:
        if count <= 0:
            logger.info("Rejected reservation of %s seats for event %s", count, event_id)
            return False
        with self._lock:
            index = self._index_of(event_id)
            if index is None:
                logger.info("Rejected reservation for unknown event %s", event_id)
                return False
            event = self._events[index]
            if event.available_seats < count:
                logger.info(
                    "Rejected reservation of %s seats for event %s: %s left",
                    count,
                    event_id,
                    event.available_seats,
                )
                return False
            self._events[index] = dataclasses.replace(
                event, available_seats=event.available_seats - count
            )
            logger.info("Reserved %s seats for event %s", count, event_id)
            self._notifier.notify(self)
            return True

    def add_event(self, draft: EventDraft) -> Event:
        with self._lock:
            event = self._append(draft)
            logger.info("Added event %s (%s)", event.id, event.name)
            self._notifier.notify(self)
            return event

    def subscribe(self, callback: Observer) -> Subscription:
        return self._notifier.subscribe(callback)


class InMemoryRegistrationLedger(RegistrationStore):
    """Registrations for one catalog, held in process memory.

    The ledger trusts its input: it does not check for duplicate
    registrations. Callers run `is_registered` first when they care.
    It shares the catalog lock, so a seat reservation and its record are
    one step for any thread serving the same session.
    """

    def __init__(
        self,
        catalog: EventStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._catalog = catalog
        self._clock = clock
        self._registrations: list[Registration] = []
        self._next_id = 1
        self._lock = catalog.lock
        self._notifier = ChangeNotifier()

    def list_registrations(self) -> list[Registration]:
        with self._lock:
            return list(self._registrations)

    def list_registrations_for_event(self, event_id: int) -> list[Registration]:
        with self._lock:
            return [r for r in self._registrations if r.event_id == event_id]

    def is_registered(self, email: str, event_id: int) -> bool:
        wanted = email.casefold()
        with self._lock:
            return any(
                r.event_id == event_id and r.email.casefold() == wanted
                for r in self._registrations
            )

    def register(self, draft: RegistrationDraft) -> bool:
        with self._lock:
            if not self._catalog.reserve_seats(draft.event_id, 1):
                return False
            registration = Registration(
                id=self._next_id,
                name=draft.name,
                email=draft.email,
                event_id=draft.event_id,
                registration_date=self._clock(),
            )
            self._next_id += 1
            self._registrations.append(registration)
            logger.info(
                "Registration %s created for event %s", registration.id, draft.event_id
            )
            self._notifier.notify(self)
            return True

    @property
    def lock(self):
        return self._lock

    def subscribe(self, callback: Observer) -> Subscription:
        return self._notifier.subscribe(callback)


EventCatalog = InMemoryEventCatalog
RegistrationLedger = InMemoryRegistrationLedger
