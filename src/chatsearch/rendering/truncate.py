"""Length-bounded display strings for room topics and member lists."""

from __future__ import annotations

from collections.abc import Callable

from chatsearch.models.rooms import Room

ELLIPSIS = "..."

NameLookup = Callable[[str], str | None]


def _truncate(value: str, max_length: int) -> str:
    if len(value) > max_length:
        return f"{value[:max_length]}{ELLIPSIS}"
    return value


def truncate_member_names(
    room: Room,
    resolve_name: NameLookup,
    max_members: int = 0,
    max_length: int = 20,
) -> str:
    """Comma-separated member names, each cut to ``max_length`` characters.

    Args:
        room: Room whose members are listed, in membership order.
        resolve_name: Lookup from member handle to display name.
        max_members: Only the first ``max_members`` handles are considered; 0 means all.
        max_length: Longest name kept before an ellipsis is appended.

    Handles without a resolvable name are left out.
    """
    handles = list(room.members)
    if max_members:
        handles = handles[:max_members]

    names: list[str] = []
    for handle in handles:
        if not handle:
            continue
        name = resolve_name(handle)
        if not name:
            continue
        names.append(_truncate(name, max_length))
    return ", ".join(names)


def truncate_topic(room: Room | None, max_length: int = 20) -> str | None:
    """Room topic cut to ``max_length`` characters; 0 keeps the whole topic.

    A missing topic is returned as is.
    """
    if room is None:
        return None
    if max_length and room.topic and len(room.topic) > max_length:
        return _truncate(room.topic, max_length)
    return room.topic
