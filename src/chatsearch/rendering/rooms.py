"""Room classification helpers."""

from __future__ import annotations

from chatsearch.models.rooms import Room, RoomType
from chatsearch.rendering.truncate import NameLookup, truncate_member_names

_GROUP_LIKE = frozenset({RoomType.GROUP, RoomType.PUBLIC})


def is_group_like(room: Room | None) -> bool:
    """True for multi-party rooms (group or public); False for a missing room."""
    return room is not None and room.type in _GROUP_LIKE


def room_title(
    room: Room | None,
    resolve_name: NameLookup,
    max_members: int = 0,
    max_length: int = 20,
) -> str:
    """Display title of a room: its topic, else the names of its members."""
    if room is None:
        return ""
    if room.topic:
        return room.topic
    return truncate_member_names(room, resolve_name, max_members, max_length)
