"""Search results page and the chat pages results open."""

from __future__ import annotations

from nicegui import ui

from chatsearch.services.protocols import RESULT_OPEN_EVENT
from chatsearch.ui.components.result_row import ResultRowSlot
from chatsearch.ui.deps import get_panel
from chatsearch.ui.theme import COLORS, build_stylesheet


def setup() -> None:
    """Register the search page and the chat pages it links to."""

    @ui.page("/")
    def search_page() -> None:
        panel = get_panel()
        snapshot = panel.snapshot
        ui.add_css(build_stylesheet())
        ui.label("Search results").classes("text-2xl font-bold mb-4")
        ui.label(f"{len(snapshot.results)} results, search {snapshot.status}").classes(
            "text-sm"
        ).style(f"color: {COLORS['text_muted']}")

        results_column = ui.column().classes("w-full gap-0")
        with results_column:
            for inputs in panel.row_inputs():
                ResultRowSlot(panel.services.renderer).update(inputs)

        # Collapse the list as soon as a result is opened.
        unsubscribe = panel.services.events.subscribe(
            RESULT_OPEN_EVENT, lambda: results_column.set_visibility(False)
        )
        ui.context.client.on_disconnect(unsubscribe)

    @ui.page("/chat/{kind}/{room_id}")
    def chat_page(kind: str, room_id: str) -> None:
        ui.label(f"Chat {room_id}").classes("text-2xl font-bold")
        ui.label(kind).style(f"color: {COLORS['text_muted']}")
        ui.button("Back to results", icon="search", on_click=lambda: ui.navigate.to("/"))
