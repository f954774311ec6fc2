"""Synchronous publish/subscribe event bus."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable

logger = logging.getLogger(__name__)

Handler = Callable[[], None]


class EventBus:
    """Delivers named, payload-less events to subscribed handlers in order."""

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, event: str, handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for ``event``; returns a callable that unsubscribes it."""
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: str) -> None:
        handlers = list(self._handlers.get(event, ()))
        logger.debug("Emitting %s to %d handler(s)", event, len(handlers))
        for handler in handlers:
            handler()
