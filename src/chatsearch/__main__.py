"""Allow ``python -m chatsearch``."""

from chatsearch.cli import app

app()
