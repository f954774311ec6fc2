"""Opening the room behind an activated search result."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from chatsearch.services.protocols import RESULT_OPEN_EVENT

if TYPE_CHECKING:
    from chatsearch.models.rooms import Room
    from chatsearch.services.protocols import EventEmitterProtocol, NavigatorProtocol

logger = logging.getLogger(__name__)


class ResultOpener:
    """Announces that a result was opened, then navigates to its room."""

    def __init__(self, events: EventEmitterProtocol, navigator: NavigatorProtocol) -> None:
        self._events = events
        self._navigator = navigator

    def open_result(self, room: Room | None) -> Result[str, str]:
        """Emit the open notification and load the room's URL.

        Observers see the notification before navigation is requested.
        Returns the URL navigated to.
        """
        if room is None:
            return Err("Search result has no room to open")
        url = room.url
        try:
            self._events.emit(RESULT_OPEN_EVENT)
            self._navigator.navigate_to(url)
        except Exception as exc:
            logger.exception("Opening search result %s failed", url)
            return Err(f"Opening search result failed: {exc}")
        logger.debug("Opened search result %s", url)
        return Ok(url)
