"""In-memory contact directory."""

from __future__ import annotations

from collections.abc import Iterable

from chatsearch.models.rooms import Contact


class ContactDirectory:
    """Contacts indexed by handle, resolving display names for rows."""

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._contacts = {contact.handle: contact for contact in contacts}

    def __len__(self) -> int:
        return len(self._contacts)

    def contact_by_handle(self, handle: str) -> Contact | None:
        if not handle:
            return None
        return self._contacts.get(handle)

    def name_by_handle(self, handle: str) -> str | None:
        contact = self.contact_by_handle(handle)
        if contact is None:
            return None
        return contact.nickname_or_name or None
