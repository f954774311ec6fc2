"""Service container with DI wiring."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chatsearch.rendering.renderer import RowRenderer
from chatsearch.services.activation import ResultOpener
from chatsearch.services.directory import ContactDirectory
from chatsearch.services.events import EventBus

if TYPE_CHECKING:
    from chatsearch.config import Config
    from chatsearch.models.rooms import Contact
    from chatsearch.services.protocols import NavigatorProtocol


@dataclass
class ServiceContainer:
    """Holds the row rendering services. Built once per search panel."""

    config: Config
    directory: ContactDirectory
    events: EventBus
    opener: ResultOpener
    renderer: RowRenderer

    @classmethod
    def create(
        cls,
        config: Config,
        navigator: NavigatorProtocol,
        contacts: Iterable[Contact] = (),
    ) -> ServiceContainer:
        """Factory that wires all dependencies."""
        directory = ContactDirectory(contacts)
        events = EventBus()
        opener = ResultOpener(events, navigator)
        renderer = RowRenderer(directory, opener, config)

        return cls(
            config=config,
            directory=directory,
            events=events,
            opener=opener,
            renderer=renderer,
        )
