"""Attach the caller's SessionContext to each request.

Contexts are keyed by an opaque id kept in the Django session and held by
the middleware instance. Least recently used contexts are dropped once
EVENTREG_MAX_SESSIONS is exceeded.
"""

import logging
import threading
import uuid
from collections import OrderedDict

from django.conf import settings

from eventreg.context import SessionContext

logger = logging.getLogger(__name__)

SESSION_KEY = "eventreg_context_id"


class SessionContextMiddleware:
    """Provide `request.eventreg`; requires SessionMiddleware to run first."""

    def __init__(self, get_response) -> None:
        self.get_response = get_response
        self.max_sessions = getattr(settings, "EVENTREG_MAX_SESSIONS", 1000)
        self._contexts: OrderedDict[str, SessionContext] = OrderedDict()
        self._lock = threading.Lock()

    def __call__(self, request):
        request.eventreg = self.context_for(request.session)
        return self.get_response(request)

    def context_for(self, session) -> SessionContext:
        context_id = session.get(SESSION_KEY)
        if context_id is None:
            context_id = uuid.uuid4().hex
            session[SESSION_KEY] = context_id
        with self._lock:
            context = self._contexts.get(context_id)
            if context is not None:
                self._contexts.move_to_end(context_id)
                return context
            context = SessionContext.create()
            self._contexts[context_id] = context
            logger.debug("Created session context %s", context_id)
            while len(self._contexts) > self.max_sessions:
                evicted, _ = self._contexts.popitem(last=False)
                logger.debug("Evicted session context %s", evicted)
            return context
