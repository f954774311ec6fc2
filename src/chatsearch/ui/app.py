"""NiceGUI application bootstrap — service init, run_app()."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nicegui import ui

from chatsearch.services.container import ServiceContainer
from chatsearch.ui.components.result_row import NiceGUINavigator
from chatsearch.ui.deps import set_panel
from chatsearch.ui.pages import search

if TYPE_CHECKING:
    from chatsearch.config import Config
    from chatsearch.models.search import SearchSnapshot

logger = logging.getLogger(__name__)


def run_app(config: Config, snapshot: SearchSnapshot) -> None:
    """Entry point: wire services, register pages and serve the results."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    container = ServiceContainer.create(config, NiceGUINavigator(), snapshot.contacts)
    set_panel(container, snapshot)
    search.setup()
    logger.info(
        "Serving %d results (%d contacts) on %s:%d",
        len(snapshot.results),
        len(container.directory),
        config.host,
        config.port,
    )

    ui.run(host=config.host, port=config.port, title="Chat search", reload=False, show=False)
