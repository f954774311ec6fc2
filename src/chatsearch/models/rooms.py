"""Room, contact and chat message models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class RoomType(StrEnum):
    """Kinds of chat rooms."""

    GROUP = "group"
    PUBLIC = "public"
    ONE_TO_ONE = "one-to-one"


_URL_PREFIX = {
    RoomType.GROUP: "g",
    RoomType.PUBLIC: "c",
    RoomType.ONE_TO_ONE: "p",
}


class Room(BaseModel):
    """A chat room snapshot."""

    room_id: str
    type: RoomType = RoomType.ONE_TO_ONE
    topic: str | None = None
    # handle -> privilege level, in the order members joined
    members: dict[str, int] = Field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"/chat/{_URL_PREFIX[self.type]}/{self.room_id}"


class Contact(BaseModel):
    """A user known to the local contact directory."""

    handle: str
    name: str = ""
    nickname: str = ""
    presence: str = "offline"
    last_green: str = ""

    @property
    def nickname_or_name(self) -> str:
        return self.nickname or self.name


class ChatMessage(BaseModel):
    """A chat message matched by the search engine."""

    message_id: str
    user_id: str = ""
    text: str = ""
    delay: int = 0
    management: bool = False
    management_summary: str = ""

    def is_management(self) -> bool:
        return self.management

    def get_management_summary_text(self) -> str:
        return self.management_summary
