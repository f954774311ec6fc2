"""Shared fixtures for chatsearch tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from chatsearch.config import Config
from chatsearch.models import Contact, Room, RoomType
from chatsearch.services.directory import ContactDirectory

SAMPLE_SNAPSHOT_PATH = Path(__file__).parent / "data" / "sample_snapshot.json"


class RecordingNavigator:
    """Navigator fake that records every URL and the shared call log."""

    def __init__(self, log: list[str] | None = None) -> None:
        self.urls: list[str] = []
        self.log = log if log is not None else []

    def navigate_to(self, url: str) -> None:
        self.urls.append(url)
        self.log.append(f"navigate:{url}")


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def contacts() -> list[Contact]:
    return [
        Contact(handle="u-alice", name="Alice Liddell", nickname="Alice", presence="online"),
        Contact(handle="u-bob", name="BobTheBuilderExtraLong", presence="away"),
        Contact(handle="u-carol", name="Carol"),
    ]


@pytest.fixture
def directory(contacts: list[Contact]) -> ContactDirectory:
    return ContactDirectory(contacts)


@pytest.fixture
def group_room() -> Room:
    return Room(
        room_id="r-group",
        type=RoomType.GROUP,
        topic="Quarterly planning",
        members={"u-alice": 2, "u-bob": 2, "u-carol": 0},
    )


@pytest.fixture
def direct_room() -> Room:
    return Room(room_id="r-direct", type=RoomType.ONE_TO_ONE, members={"u-bob": 2})


@pytest.fixture
def sample_snapshot_path(tmp_path: Path) -> Path:
    """Copy of the sample snapshot JSON file."""
    target = tmp_path / "snapshot.json"
    shutil.copy(SAMPLE_SNAPSHOT_PATH, target)
    return target
