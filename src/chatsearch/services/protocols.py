"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from chatsearch.models.rooms import Contact

RESULT_OPEN_EVENT = "chatSearchResultOpen"


class NameResolverProtocol(Protocol):
    """Resolves a user handle to a display name."""

    def name_by_handle(self, handle: str) -> str | None: ...


class ContactResolverProtocol(NameResolverProtocol, Protocol):
    """Resolves a user handle to a contact."""

    def contact_by_handle(self, handle: str) -> Contact | None: ...


class EventEmitterProtocol(Protocol):
    """Publishes payload-less notifications to observers."""

    def emit(self, event: str) -> None: ...


class NavigatorProtocol(Protocol):
    """Loads a page of the chat application."""

    def navigate_to(self, url: str) -> None: ...
