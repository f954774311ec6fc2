"""Search result models."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from chatsearch.models.rooms import ChatMessage, Contact, Room


class SearchStatus(StrEnum):
    """Overall status of the search that produced the results."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    PAUSED = "paused"
    COMPLETED = "completed"


class ResultType(StrEnum):
    """Type tags of the known result kinds."""

    MESSAGE = "message"
    CHAT = "chat"
    MEMBER = "member"
    NIL = "nil"


class Match(BaseModel):
    """A matched search term; ``idx`` identifies the term, not its position."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    term: str = Field(alias="str")
    idx: int = 0


class _ResultBase(BaseModel):
    room: Room | None = None
    matches: list[Match] = Field(default_factory=list)


class MessageResult(_ResultBase):
    """A chat message hit."""

    type: Literal["message"] = "message"
    data: ChatMessage
    text: str = ""


class ChatResult(_ResultBase):
    """A chat room hit, matched on its topic."""

    type: Literal["chat"] = "chat"


class MemberResult(_ResultBase):
    """A member/contact hit. ``data`` is the member's handle."""

    type: Literal["member"] = "member"
    data: str | None = None


class NilResult(_ResultBase):
    """Placeholder shown when a completed search found nothing."""

    type: Literal["nil"] = "nil"


class CustomResult(_ResultBase):
    """Caller supplied row with an unrecognised type tag."""

    type: str = "custom"
    children: str = ""


_KNOWN_TAGS = frozenset(tag.value for tag in ResultType)


def _result_tag(value: Any) -> str:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    tag = str(tag) if tag is not None else ""
    return tag if tag in _KNOWN_TAGS else "custom"


SearchResult = Annotated[
    Union[
        Annotated[MessageResult, Tag(ResultType.MESSAGE.value)],
        Annotated[ChatResult, Tag(ResultType.CHAT.value)],
        Annotated[MemberResult, Tag(ResultType.MEMBER.value)],
        Annotated[NilResult, Tag(ResultType.NIL.value)],
        Annotated[CustomResult, Tag("custom")],
    ],
    Discriminator(_result_tag),
]


class RowInputs(BaseModel):
    """Everything a single result row is rendered from."""

    model_config = ConfigDict(frozen=True)

    result: SearchResult
    status: SearchStatus = SearchStatus.PENDING
    children: str = ""


class SearchSnapshot(BaseModel):
    """A search panel state: its status, known contacts and ordered results."""

    status: SearchStatus = SearchStatus.COMPLETED
    contacts: list[Contact] = Field(default_factory=list)
    results: list[SearchResult] = Field(default_factory=list)
