from eventreg.handlers.views import (
    EventDetailView,
    EventListView,
    EventRegistrationListView,
    RegistrationListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventRegistrationListView",
    "RegistrationListView",
]
