"""Configuration for chatsearch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Rendering and demo server configuration."""

    topic_max_length: int = 20
    member_name_max_length: int = 20
    max_members: int = 0
    no_results_label: str = "No results"
    static_path: str = "/static/"
    port: int = 8765
    host: str = "127.0.0.1"

    @property
    def no_results_icon(self) -> str:
        return f"{self.static_path}images/temp/search-icon.png"
