"""Search result row component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nicegui import ui
from result import Err

from chatsearch.rendering.markup import render_row_markup
from chatsearch.rendering.recompute import RenderHost

if TYPE_CHECKING:
    from chatsearch.models.search import RowInputs
    from chatsearch.rendering.renderer import RowRenderer
    from chatsearch.rendering.rows import RowView


class NiceGUINavigator:
    """Navigates the current NiceGUI client."""

    def navigate_to(self, url: str) -> None:
        ui.navigate.to(url)


def render_result_row(renderer: RowRenderer, inputs: RowInputs) -> ui.html | None:
    """Render a single search result row; clicking it opens the result's room."""
    view = renderer.view(inputs)
    if view is None:
        return None
    element = ui.html(render_row_markup(view), sanitize=False).classes("w-full")
    if view.room is not None:
        element.on("click", lambda _e, v=view: _activate(renderer, v))
    return element


def _activate(renderer: RowRenderer, view: RowView) -> None:
    result = renderer.activate(view)
    if isinstance(result, Err):
        ui.notify(result.err_value, type="negative")


class ResultRowSlot:
    """A list position whose row is redrawn only when its inputs change."""

    def __init__(self, renderer: RowRenderer) -> None:
        self._renderer = renderer
        self._container = ui.element("div").classes("w-full")
        self._host: RenderHost[RowInputs, ui.html | None] = RenderHost(self._draw)

    def update(self, inputs: RowInputs) -> bool:
        return self._host.update(inputs)

    def _draw(self, inputs: RowInputs) -> ui.html | None:
        self._container.clear()
        with self._container:
            return render_result_row(self._renderer, inputs)
