from eventreg.stores.interfaces import EventStore, RegistrationStore
from eventreg.stores.memory_store import (
    EventCatalog,
    InMemoryEventCatalog,
    InMemoryRegistrationLedger,
    RegistrationLedger,
)

__all__ = [
    "EventStore",
    "RegistrationStore",
    "EventCatalog",
    "RegistrationLedger",
    "InMemoryEventCatalog",
    "InMemoryRegistrationLedger",
]
