"""Root row renderer: template selection, markup and activation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from result import Err, Result

from chatsearch.rendering.markup import render_row_markup
from chatsearch.rendering.rows import NilRow, PassthroughRow, RowView, build_row

if TYPE_CHECKING:
    from chatsearch.config import Config
    from chatsearch.models.search import RowInputs
    from chatsearch.services.activation import ResultOpener
    from chatsearch.services.protocols import ContactResolverProtocol


class RowRenderer:
    """Renders search result rows and opens their rooms on activation."""

    def __init__(
        self, directory: ContactResolverProtocol, opener: ResultOpener, config: Config
    ) -> None:
        self._directory = directory
        self._opener = opener
        self._config = config

    def view(self, inputs: RowInputs) -> RowView | None:
        return build_row(inputs, self._directory, self._config)

    def render(self, inputs: RowInputs) -> str:
        return render_row_markup(self.view(inputs))

    def activate(self, view: RowView) -> Result[str, str]:
        """Handle a click on a rendered row."""
        if isinstance(view, NilRow | PassthroughRow):
            return Err("Row cannot be opened")
        return self._opener.open_result(view.room)
