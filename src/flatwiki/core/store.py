"""Flat-file page storage.

Storage layout:
    <pages_dir>/
    ├── FrontPage.txt     # Raw page body
    └── Alpha1.txt

A page's file name is derived from its title, there is no other index.
Writes are not locked: concurrent saves to one title race and the last
write wins.
"""

import os
from dataclasses import dataclass
from pathlib import Path

PAGE_SUFFIX = ".txt"
PAGE_FILE_MODE = 0o600


@dataclass
class Page:
    """A wiki page: a title and its raw body."""

    title: str
    body: bytes

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


class PageStore:
    """Loads and saves pages as ``<title>.txt`` files in one directory.

    Titles are used verbatim as file names and are expected to be validated
    by the caller (see ``flatwiki.core.titles``).
    """

    def __init__(self, pages_dir: Path) -> None:
        """Initialize store with directory path.

        Args:
            pages_dir: Directory holding the page files
        """
        self._pages_dir = pages_dir

    @property
    def pages_dir(self) -> Path:
        """Directory holding the page files."""
        return self._pages_dir

    def path_for(self, title: str) -> Path:
        return self._pages_dir / f"{title}{PAGE_SUFFIX}"

    def save(self, page: Page) -> None:
        """Write the page body to its file, creating or truncating it.

        New files are created readable and writable by the owner only.

        Args:
            page: Page to persist

        Raises:
            OSError: If the file cannot be written
        """
        path = self.path_for(page.title)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(page.body)

    def load(self, title: str) -> Page:
        """Read a page from its file.

        Args:
            title: Page title

        Returns:
            Page with the file's full contents as body

        Raises:
            FileNotFoundError: If no page exists for the title
            OSError: If the file cannot be read
        """
        body = self.path_for(title).read_bytes()
        return Page(title=title, body=body)
