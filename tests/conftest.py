"""Shared test fixtures."""

from pathlib import Path

import pytest
from flatwiki.config import Config, PagesConfig, ServerConfig, TemplatesConfig


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    pages = tmp_path / "pages"
    pages.mkdir(exist_ok=True)
    return pages


@pytest.fixture
def test_config(pages_dir: Path) -> Config:
    """Create a test configuration storing pages under tmp_path."""
    return Config(
        server=ServerConfig(),
        pages=PagesConfig(pages_dir=pages_dir),
        templates=TemplatesConfig(),
    )


def write_templates(directory: Path, *, view: str, edit: str) -> Path:
    """Write a view/edit template pair into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "view.html").write_text(view)
    (directory / "edit.html").write_text(edit)
    return directory
