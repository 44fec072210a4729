"""Data models for FlatWiki."""

from pydantic import BaseModel


class Page(BaseModel):
    """Represents a wiki page."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Return body decoded for display."""
        return self.body.decode("utf-8", errors="replace")
