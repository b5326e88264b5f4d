"""Per-session state: one event catalog and its registration ledger."""

from dataclasses import dataclass

from eventreg.stores import EventCatalog, EventStore, RegistrationLedger, RegistrationStore


@dataclass(frozen=True)
class SessionContext:
    """The catalog/ledger pair serving a single user session."""

    catalog: EventStore
    ledger: RegistrationStore

    @classmethod
    def create(cls) -> "SessionContext":
        catalog = EventCatalog()
        return cls(catalog=catalog, ledger=RegistrationLedger(catalog))
