"""HTML markup for result row views."""

from __future__ import annotations

from html import escape
from typing import assert_never

from chatsearch.rendering.rows import (
    ChatRow,
    MemberLayout,
    MemberRow,
    MessageRow,
    NilRow,
    PassthroughRow,
    RowView,
)

SEARCH_ROW_CLASS = "result-table-row"
USER_CARD_CLASS = "user-card"

_GROUP_MARKER = '<div class="group-chat"></div>'
_CLEAR = '<div class="clear"></div>'


def _presence(presence: str) -> str:
    if not presence:
        return ""
    return f'<span class="presence {escape(presence)}"></span>'


def _avatar(handle: str) -> str:
    return f'<div class="avatar" data-handle="{escape(handle)}"></div>'


def render_row_markup(view: RowView | None) -> str:
    """Markup for a row view; an empty string when there is nothing to render."""
    match view:
        case None:
            return ""
        case MessageRow():
            title = escape(view.title, quote=False)
            return (
                f'<div class="{SEARCH_ROW_CLASS} message">'
                f'<span class="title">{title}{_presence(view.presence)}</span>'
                f'<div class="summary">{view.summary_html}</div>'
                f'<span class="date">{escape(view.date, quote=False)}</span>'
                "</div>"
            )
        case ChatRow():
            return (
                f'<div class="{SEARCH_ROW_CLASS}">'
                f"{_GROUP_MARKER}"
                f'<div class="{USER_CARD_CLASS}">'
                f'<div class="graphic"><span>{view.topic_html}</span></div>'
                "</div>"
                f"{_CLEAR}"
                "</div>"
            )
        case MemberRow():
            return (
                f'<div class="{SEARCH_ROW_CLASS}">'
                f"{_GROUP_MARKER if view.is_group else _avatar(view.handle)}"
                f'<div class="{USER_CARD_CLASS}">{_user_card(view)}</div>'
                f"{_CLEAR}"
                "</div>"
            )
        case NilRow():
            label = escape(view.label)
            return (
                f'<div class="{SEARCH_ROW_CLASS} nil">'
                f'<img src="{escape(view.icon)}" alt="{label}" />'
                f"<span>{label}</span>"
                "</div>"
            )
        case PassthroughRow():
            return f'<div class="{SEARCH_ROW_CLASS}">{view.children}</div>'
        case _:
            assert_never(view)


def _user_card(view: MemberRow) -> str:
    subject = f"<span>{view.subject_html}</span>"
    if view.layout is MemberLayout.GRAPHIC:
        return f'<div class="graphic">{subject}{_presence(view.presence)}</div>'
    if view.is_group:
        detail = f'<span class="members-amount">{escape(view.members_count, quote=False)}</span>'
    else:
        last_activity = escape(view.last_activity, quote=False)
        detail = f'{_presence(view.presence)}<span class="last-activity">{last_activity}</span>'
    return f'<div class="textual">{subject}{detail}</div>'
