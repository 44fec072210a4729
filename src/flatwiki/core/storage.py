"""Storage abstraction for wiki pages."""

import os
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.errors import PageNotFoundError, StorageError
from flatwiki.core.models import Page


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if absent."""
        ...

    @abstractmethod
    async def save(self, page: Page) -> Page:
        """Save a page, replacing any previous content."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is a single file holding its raw body bytes.
    File naming: <title>.txt

    Titles are used verbatim in the path, so callers must restrict them to
    the route grammar first. Writes take no locks: concurrent saves of the
    same title race and the last completed write wins. New files are created
    with FILE_MODE; an existing file keeps its permissions.
    """

    FILE_SUFFIX = ".txt"
    FILE_MODE = 0o600

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / (title + self.FILE_SUFFIX)

    async def load(self, title: str) -> Page:
        """Load a page by title."""
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError:
            raise PageNotFoundError(title) from None
        except OSError as e:
            raise StorageError(title, str(e), operation="load") from e
        return Page(title=title, body=body)

    async def save(self, page: Page) -> Page:
        """Save a page."""
        path = self._get_path(page.title)
        try:
            flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
            fd = os.open(path, flags, self.FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            raise StorageError(page.title, str(e)) from e
        return page
