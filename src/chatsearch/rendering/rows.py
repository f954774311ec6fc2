"""Row template selection: which view a search result is rendered with."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from html import escape
from typing import TYPE_CHECKING, assert_never

from chatsearch.models.search import (
    ChatResult,
    CustomResult,
    Match,
    MemberResult,
    MessageResult,
    NilResult,
    RowInputs,
    SearchStatus,
)
from chatsearch.rendering.formatting import (
    format_last_activity,
    format_member_count,
    format_timestamp,
)
from chatsearch.rendering.highlight import highlight
from chatsearch.rendering.rooms import is_group_like, room_title
from chatsearch.rendering.truncate import truncate_topic

if TYPE_CHECKING:
    from chatsearch.config import Config
    from chatsearch.models.rooms import Contact, Room
    from chatsearch.services.protocols import ContactResolverProtocol


class MemberLayout(StrEnum):
    """``graphic`` focuses on the matched text; ``textual`` shows activity details."""

    GRAPHIC = "graphic"
    TEXTUAL = "textual"


@dataclass(frozen=True)
class MessageRow:
    room: Room | None
    title: str
    presence: str
    summary_html: str
    date: str


@dataclass(frozen=True)
class ChatRow:
    room: Room | None
    topic_html: str
    is_group: bool = True


@dataclass(frozen=True)
class MemberRow:
    room: Room | None
    layout: MemberLayout
    is_group: bool
    subject_html: str
    handle: str = ""
    presence: str = ""
    members_count: str = ""
    last_activity: str = ""


@dataclass(frozen=True)
class NilRow:
    label: str
    icon: str
    room: None = None


@dataclass(frozen=True)
class PassthroughRow:
    children: str = ""
    room: None = None


RowView = MessageRow | ChatRow | MemberRow | NilRow | PassthroughRow


def build_row(
    inputs: RowInputs, directory: ContactResolverProtocol, config: Config
) -> RowView | None:
    """Select the template for ``inputs.result`` and assemble its data.

    Returns None when nothing should be rendered (a nil result of a search
    that has not completed yet).
    """
    result = inputs.result
    match result:
        case MessageResult():
            return _message_row(result, directory)
        case ChatResult():
            topic = result.room.topic if result.room else None
            return ChatRow(room=result.room, topic_html=_highlighted(topic, result.matches))
        case MemberResult():
            return _member_row(result, directory, config)
        case NilResult():
            if inputs.status != SearchStatus.COMPLETED:
                return None
            return NilRow(label=config.no_results_label, icon=config.no_results_icon)
        case CustomResult():
            return PassthroughRow(children=inputs.children or result.children)
        case _:
            assert_never(result)


def _escape_text(value: str) -> str:
    return escape(value, quote=False)


def _highlighted(text: str | None, matches: Sequence[Match]) -> str:
    """Highlight ``text`` matched on its raw form, escaping each piece."""
    if not text:
        return ""
    return highlight(text, matches, escape=_escape_text)


def _message_row(result: MessageResult, directory: ContactResolverProtocol) -> MessageRow:
    data = result.data
    if data.is_management():
        summary = data.get_management_summary_text()
    else:
        summary = result.text or data.text
    contact = directory.contact_by_handle(data.user_id)
    return MessageRow(
        room=result.room,
        title=contact.nickname_or_name if contact else "",
        presence=contact.presence if contact else "",
        summary_html=_highlighted(summary, result.matches),
        date=format_timestamp(data.delay),
    )


def _member_row(
    result: MemberResult, directory: ContactResolverProtocol, config: Config
) -> MemberRow:
    room = result.room
    is_group = is_group_like(room)
    contact: Contact | None = None if is_group else directory.contact_by_handle(result.data or "")
    has_highlight = bool(result.matches)

    if is_group:
        title = room_title(
            room,
            directory.name_by_handle,
            max_members=config.max_members,
            max_length=config.member_name_max_length,
        )
    else:
        title = contact.nickname_or_name if contact else ""

    if has_highlight:
        return MemberRow(
            room=room,
            layout=MemberLayout.GRAPHIC,
            is_group=is_group,
            subject_html=_highlighted(title, result.matches),
            handle=result.data or "",
            presence="" if is_group or contact is None else contact.presence,
        )

    if is_group:
        subject = truncate_topic(room, config.topic_max_length) or title
        return MemberRow(
            room=room,
            layout=MemberLayout.TEXTUAL,
            is_group=True,
            subject_html=_escape_text(subject),
            members_count=format_member_count(len(room.members)) if room else "",
        )
    return MemberRow(
        room=room,
        layout=MemberLayout.TEXTUAL,
        is_group=False,
        subject_html=_escape_text(title),
        handle=result.data or "",
        presence=contact.presence if contact else "",
        last_activity=format_last_activity(contact.presence, contact.last_green) if contact else "",
    )
