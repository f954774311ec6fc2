"""Tests for row activation: open notification, then navigation."""

from __future__ import annotations

from result import Err, Ok

from chatsearch.config import Config
from chatsearch.models import (
    ChatMessage,
    ChatResult,
    CustomResult,
    MemberResult,
    MessageResult,
    NilResult,
    Room,
    RowInputs,
    SearchStatus,
)
from chatsearch.rendering.renderer import RowRenderer
from chatsearch.services.activation import ResultOpener
from chatsearch.services.directory import ContactDirectory
from chatsearch.services.events import EventBus
from chatsearch.services.protocols import RESULT_OPEN_EVENT
from tests.conftest import RecordingNavigator


def _wired(directory: ContactDirectory) -> tuple[RowRenderer, EventBus, RecordingNavigator]:
    log: list[str] = []
    events = EventBus()
    events.subscribe(RESULT_OPEN_EVENT, lambda: log.append("open"))
    navigator = RecordingNavigator(log)
    renderer = RowRenderer(directory, ResultOpener(events, navigator), Config())
    return renderer, events, navigator


def test_event_bus_delivers_in_subscription_order() -> None:
    bus = EventBus()
    calls: list[str] = []
    bus.subscribe("e", lambda: calls.append("first"))
    unsubscribe = bus.subscribe("e", lambda: calls.append("second"))
    bus.emit("e")
    unsubscribe()
    unsubscribe()
    bus.emit("e")
    bus.emit("other")
    assert calls == ["first", "second", "first"]


def test_every_openable_row_notifies_then_navigates(
    directory: ContactDirectory, group_room: Room, direct_room: Room
) -> None:
    results = [
        MessageResult(room=group_room, data=ChatMessage(message_id="m", user_id="u-alice")),
        ChatResult(room=group_room),
        MemberResult(room=direct_room, data="u-bob"),
    ]
    for result in results:
        renderer, _events, navigator = _wired(directory)
        view = renderer.view(RowInputs(result=result))
        assert view is not None

        opened = renderer.activate(view)

        assert isinstance(opened, Ok)
        assert opened.ok_value == result.room.url  # type: ignore[union-attr]
        assert navigator.log == ["open", f"navigate:{result.room.url}"]  # type: ignore[union-attr]


def test_nil_and_custom_rows_cannot_be_opened(directory: ContactDirectory) -> None:
    renderer, _events, navigator = _wired(directory)
    for inputs in (
        RowInputs(result=NilResult(), status=SearchStatus.COMPLETED),
        RowInputs(result=CustomResult(children="x")),
    ):
        view = renderer.view(inputs)
        assert view is not None
        assert isinstance(renderer.activate(view), Err)
    assert navigator.log == []


def test_opening_without_room_is_an_error() -> None:
    navigator = RecordingNavigator()
    opener = ResultOpener(EventBus(), navigator)
    opened = opener.open_result(None)
    assert isinstance(opened, Err)
    assert navigator.urls == []


def test_observer_failure_is_reported_and_skips_navigation(group_room: Room) -> None:
    events = EventBus()

    def broken() -> None:
        raise RuntimeError("boom")

    events.subscribe(RESULT_OPEN_EVENT, broken)
    navigator = RecordingNavigator()
    opened = ResultOpener(events, navigator).open_result(group_room)
    assert isinstance(opened, Err)
    assert "boom" in opened.err_value
    assert navigator.urls == []
