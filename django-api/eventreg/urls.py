from django.urls import path

from eventreg.handlers import (
    EventDetailView,
    EventListView,
    EventRegistrationListView,
    RegistrationListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registrations",
        EventRegistrationListView.as_view(),
        name="event-registration-list",
    ),
    path("registrations", RegistrationListView.as_view(), name="registration-list"),
]
