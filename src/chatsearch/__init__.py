"""Chat search result rows: highlighting, truncation and row templates."""
