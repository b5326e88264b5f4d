"""Change notification for the in-memory catalog and ledger.

Each manager owns one ChangeNotifier. Observers are zero-argument callables
run synchronously, in subscription order, after a mutation is committed.
An observer that raises is logged and skipped; the change stays committed
and the remaining observers still run.
"""

import logging
from collections.abc import Callable

from django.dispatch import Signal

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


class Subscription:
    """Handle returned by ChangeNotifier.subscribe.

    Closing the handle unsubscribes the observer. Use it as a context
    manager to release the subscription on every exit path.
    """

    def __init__(self, signal: Signal, callback: Observer) -> None:
        self._signal = signal

        def receiver(sender, **kwargs) -> None:
            callback()

        self._receiver = receiver
        signal.connect(receiver, weak=False)

    @property
    def active(self) -> bool:
        return self._receiver is not None

    def close(self) -> None:
        if self._receiver is None:
            return
        self._signal.disconnect(self._receiver)
        self._receiver = None

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ChangeNotifier:
    """Synchronous publish/subscribe built on a per-instance Django signal."""

    def __init__(self) -> None:
        self._signal = Signal()

    def subscribe(self, callback: Observer) -> Subscription:
        return Subscription(self._signal, callback)

    def notify(self, sender: object) -> None:
        for receiver, error in self._signal.send_robust(sender=sender):
            if not isinstance(error, Exception):
                continue
            logger.error(
                "Observer %r failed after a committed change",
                receiver,
                exc_info=(type(error), error, error.__traceback__),
            )
