"""Sample events every new catalog starts with."""

from datetime import UTC, datetime

from eventreg.domain import EventDraft

SAMPLE_EVENTS: tuple[EventDraft, ...] = (
    EventDraft(
        name="Tech Conference 2026",
        location="Convention Center",
        date=datetime(2026, 3, 15, tzinfo=UTC),
        total_seats=50,
    ),
    EventDraft(
        name="Workshop: Blazor Basics",
        location="University Hall",
        date=datetime(2026, 2, 20, tzinfo=UTC),
        total_seats=30,
    ),
    EventDraft(
        name="Networking Mixer",
        location="Business Plaza",
        date=datetime(2026, 4, 10, tzinfo=UTC),
        total_seats=100,
    ),
    EventDraft(
        name="AI & Machine Learning Seminar",
        location="Tech Park Auditorium",
        date=datetime(2026, 5, 5, tzinfo=UTC),
        total_seats=75,
    ),
)
