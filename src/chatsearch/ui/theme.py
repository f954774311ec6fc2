"""Theme, color definitions and the row stylesheet."""

from __future__ import annotations

from chatsearch.rendering.formatting import (
    format_last_activity,
    format_member_count,
    format_relative_time,
    format_timestamp,
)

__all__ = [
    "COLORS",
    "FONT_FAMILY",
    "build_stylesheet",
    "format_last_activity",
    "format_member_count",
    "format_relative_time",
    "format_timestamp",
]

# ── Color palette — light theme with red accents ──

COLORS = {
    "primary": "#D90007",
    "primary_light": "#FDECEC",
    "success": "#27AE60",
    "bg": "#FFFFFF",
    "panel_bg": "#FAFAFA",
    "border": "#E0E0E0",
    "text": "#1A1A1A",
    "text_muted": "#999999",
    "highlight": "#FFF3B0",
    "presence_online": "#27AE60",
    "presence_away": "#F39C12",
    "presence_busy": "#E74C3C",
    "presence_offline": "#BBBBBB",
}

FONT_FAMILY = "-apple-system, 'SF Pro Text', 'Helvetica Neue', 'Segoe UI', Roboto, sans-serif"

# ── Row stylesheet ──


def build_stylesheet() -> str:
    """Build the CSS used by search result rows."""
    c = COLORS
    return f"""
.result-table-row {{
    font-family: {FONT_FAMILY};
    font-size: 13px;
    color: {c["text"]};
    background-color: {c["bg"]};
    border-bottom: 1px solid {c["border"]};
    padding: 8px 12px;
    cursor: pointer;
}}
.result-table-row:hover {{
    background-color: {c["primary_light"]};
}}
.result-table-row strong {{
    background-color: {c["highlight"]};
    font-weight: 600;
}}
.result-table-row .date,
.result-table-row .textual .members-amount,
.result-table-row .textual .last-activity {{
    color: {c["text_muted"]};
    font-size: 11px;
}}
.result-table-row.nil {{
    cursor: default;
    text-align: center;
    color: {c["text_muted"]};
}}
.result-table-row .presence {{
    display: inline-block;
    width: 8px;
    height: 8px;
    border-radius: 4px;
    margin-left: 4px;
    background-color: {c["presence_offline"]};
}}
.result-table-row .presence.online {{ background-color: {c["presence_online"]}; }}
.result-table-row .presence.away {{ background-color: {c["presence_away"]}; }}
.result-table-row .presence.busy {{ background-color: {c["presence_busy"]}; }}
.result-table-row .clear {{ clear: both; }}
"""
