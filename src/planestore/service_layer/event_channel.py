"""Explicit event channel for delivering events to subscribers."""

import logging
from collections import defaultdict
from collections.abc import Callable

from .events import Event

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event], None]


class EventChannel:
    """A simple synchronous channel routing events to their subscribers.

    Owners push events in with `publish`; every handler subscribed to the
    event's exact type is called in subscription order, in the publisher's
    thread. There is no global dispatch: only components handed this channel
    can subscribe to it.

    Note:
        An event with no subscribers is logged at DEBUG and dropped. A
        handler that raises is logged and the exception propagates to the
        publisher; remaining handlers for that event are not called.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[type[Event], list[EventHandler]] = defaultdict(
            list
        )

    def subscribe(self, event_type: type[Event], handler: EventHandler) -> None:
        """Register ``handler`` to receive events of ``event_type``."""
        self._handlers[event_type].append(handler)
        logger.debug(
            "Subscribed handler %s to %s",
            self._get_handler_name(handler),
            event_type.__name__,
        )

    def subscribers(self, event_type: type[Event]) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event_type, ()))

    def publish(self, event: Event) -> None:
        """Deliver ``event`` to every handler subscribed to its type.

        Raises:
            Exception: If a handler raises an exception.
        """

        handlers = self.subscribers(type(event))
        if not handlers:
            logger.debug("No subscribers for event %s", type(event).__name__)
            return
        for handler in handlers:
            handler_name = self._get_handler_name(handler)
            logger.debug("Delivering event %s to handler %s", event, handler_name)
            try:
                handler(event)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception delivering event %s to handler %s", event, handler_name
                )
                raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., None]) -> str:
        if hasattr(fn, "__qualname__"):
            return fn.__qualname__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
