"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

Every handler works on the SessionContext that SessionContextMiddleware
attaches to the request as `request.eventreg`.
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventreg.domain.errors import DomainError, ErrorCode
from eventreg.handlers.serializers import (
    EventDraftSerializer,
    EventSerializer,
    RegistrationRequestSerializer,
    RegistrationSerializer,
)
from eventreg.services import EventService, RegistrationService

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_FULL: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


class SessionAPIView(APIView):
    """Base view mapping domain errors raised by services to responses."""

    def event_service(self, request: Request) -> EventService:
        return EventService(request.eventreg.catalog)

    def registration_service(self, request: Request) -> RegistrationService:
        context = request.eventreg
        return RegistrationService(context.catalog, context.ledger)

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            logger.info("Request rejected: %s", exc)
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(SessionAPIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.event_service(request).list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventDraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.event_service(request).add_event(serializer.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(SessionAPIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.event_service(request).get_event(event_id)
        return Response(EventSerializer(event).data)


class EventRegistrationListView(SessionAPIView):
    """Handler for GET /api/events/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        registrations = self.event_service(request).get_registrations_for_event(
            event_id, request.eventreg.ledger
        )
        return Response(RegistrationSerializer(registrations, many=True).data)


class RegistrationListView(SessionAPIView):
    """Handler for GET/POST /api/registrations"""

    def get(self, request: Request) -> Response:
        registrations = self.registration_service(request).list_registrations()
        return Response(RegistrationSerializer(registrations, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = RegistrationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        registration = self.registration_service(request).register(
            serializer.to_draft()
        )
        return Response(
            RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED
        )
