"""Unit tests for services using fakes (no UI, no server)."""

from __future__ import annotations

from result import Ok

from chatsearch.config import Config
from chatsearch.models import ChatResult, Contact, Room, RoomType, RowInputs
from chatsearch.services.container import ServiceContainer
from chatsearch.services.directory import ContactDirectory
from chatsearch.services.protocols import RESULT_OPEN_EVENT
from tests.conftest import RecordingNavigator


def test_directory_resolves_names_and_contacts(directory: ContactDirectory) -> None:
    assert len(directory) == 3
    assert directory.name_by_handle("u-alice") == "Alice"
    assert directory.name_by_handle("u-carol") == "Carol"
    assert directory.name_by_handle("missing") is None
    assert directory.name_by_handle("") is None
    contact = directory.contact_by_handle("u-bob")
    assert contact is not None and contact.presence == "away"


def test_directory_treats_nameless_contacts_as_unresolved() -> None:
    directory = ContactDirectory([Contact(handle="u-x")])
    assert directory.contact_by_handle("u-x") is not None
    assert directory.name_by_handle("u-x") is None


def test_service_container_wiring(contacts: list[Contact]) -> None:
    navigator = RecordingNavigator()
    container = ServiceContainer.create(Config(), navigator, contacts)
    assert len(container.directory) == len(contacts)

    opened: list[str] = []
    container.events.subscribe(RESULT_OPEN_EVENT, lambda: opened.append("open"))

    room = Room(room_id="r1", type=RoomType.GROUP, topic="Ops")
    view = container.renderer.view(RowInputs(result=ChatResult(room=room)))
    assert view is not None
    assert container.renderer.activate(view) == Ok("/chat/g/r1")
    assert opened == ["open"]
    assert navigator.urls == ["/chat/g/r1"]
