"""Pydantic models for chatsearch."""

from chatsearch.models.rooms import ChatMessage, Contact, Room, RoomType
from chatsearch.models.search import (
    ChatResult,
    CustomResult,
    Match,
    MemberResult,
    MessageResult,
    NilResult,
    ResultType,
    RowInputs,
    SearchResult,
    SearchSnapshot,
    SearchStatus,
)

__all__ = [
    "ChatMessage",
    "ChatResult",
    "Contact",
    "CustomResult",
    "Match",
    "MemberResult",
    "MessageResult",
    "NilResult",
    "ResultType",
    "Room",
    "RoomType",
    "RowInputs",
    "SearchResult",
    "SearchSnapshot",
    "SearchStatus",
]
