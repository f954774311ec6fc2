"""Per-app search panel state shared by the UI pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nicegui import app

from chatsearch.models.search import RowInputs

if TYPE_CHECKING:
    from chatsearch.models.search import SearchSnapshot
    from chatsearch.services.container import ServiceContainer

_PANEL_KEY = "chatsearch_panel"


@dataclass(frozen=True)
class SearchPanel:
    """The wired services plus the snapshot whose results the panel lists."""

    services: ServiceContainer
    snapshot: SearchSnapshot

    def row_inputs(self) -> list[RowInputs]:
        status = self.snapshot.status
        return [RowInputs(result=result, status=status) for result in self.snapshot.results]


def set_panel(services: ServiceContainer, snapshot: SearchSnapshot) -> SearchPanel:
    """Store the panel for ``snapshot`` in NiceGUI app state."""
    panel = SearchPanel(services=services, snapshot=snapshot)
    setattr(app.state, _PANEL_KEY, panel)
    return panel


def get_panel() -> SearchPanel:
    """Retrieve the search panel; pages fail loudly before ``set_panel``."""
    panel = getattr(app.state, _PANEL_KEY, None)
    if panel is None:
        msg = "Search panel not initialized"
        raise RuntimeError(msg)
    return panel  # type: ignore[return-value]
