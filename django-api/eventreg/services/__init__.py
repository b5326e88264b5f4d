from eventreg.services.event_service import EventService, parse_event_id
from eventreg.services.registration_service import RegistrationService

__all__ = ["EventService", "RegistrationService", "parse_event_id"]
