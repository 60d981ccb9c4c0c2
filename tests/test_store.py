"""Tests for flat-file page storage."""

import stat
from pathlib import Path

import pytest
from flatwiki.core.store import Page, PageStore


class TestPage:
    """Tests for Page."""

    def test__text__decodes_utf8_body(self) -> None:
        page = Page(title="Cafe", body="crème brûlée".encode())

        assert page.text == "crème brûlée"

    def test__text__replaces_invalid_bytes(self) -> None:
        page = Page(title="Broken", body=b"ok \xff")

        assert page.text == "ok �"


class TestPageStoreSave:
    """Tests for PageStore.save()."""

    def test__new_page__writes_title_txt(self, pages_dir: Path) -> None:
        """Write the body to <title>.txt."""
        store = PageStore(pages_dir)

        store.save(Page(title="TestPage", body=b"This is a test Page."))

        assert (pages_dir / "TestPage.txt").read_bytes() == b"This is a test Page."

    def test__new_page__owner_only_permissions(self, pages_dir: Path) -> None:
        """Create page files readable and writable by the owner only."""
        store = PageStore(pages_dir)

        store.save(Page(title="Private", body=b"secret"))

        mode = stat.S_IMODE((pages_dir / "Private.txt").stat().st_mode)
        assert mode == 0o600

    def test__existing_page__truncates_file(self, pages_dir: Path) -> None:
        """Replace previous contents entirely."""
        store = PageStore(pages_dir)
        store.save(Page(title="Notes", body=b"a much longer first version"))

        store.save(Page(title="Notes", body=b"short"))

        assert (pages_dir / "Notes.txt").read_bytes() == b"short"

    def test__sequential_saves__last_write_wins(self, pages_dir: Path) -> None:
        store = PageStore(pages_dir)

        for i in range(5):
            store.save(Page(title="Counter", body=f"version {i}".encode()))

        assert store.load("Counter").body == b"version 4"

    def test__missing_directory__raises_os_error(self, tmp_path: Path) -> None:
        """Propagate filesystem errors to the caller."""
        store = PageStore(tmp_path / "does-not-exist")

        with pytest.raises(OSError):
            store.save(Page(title="Lost", body=b"nowhere to go"))


class TestPageStoreLoad:
    """Tests for PageStore.load()."""

    @pytest.mark.parametrize("title", ["A", "Alpha1", "FrontPage", "x9Y8z7"])
    def test__saved_page__round_trips(self, pages_dir: Path, title: str) -> None:
        store = PageStore(pages_dir)
        store.save(Page(title=title, body=b"line one\nline two\n"))

        page = store.load(title)

        assert page == Page(title=title, body=b"line one\nline two\n")

    def test__empty_body__loads_empty(self, pages_dir: Path) -> None:
        store = PageStore(pages_dir)
        store.save(Page(title="Empty", body=b""))

        assert store.load("Empty").body == b""

    def test__missing_page__raises_file_not_found(self, pages_dir: Path) -> None:
        store = PageStore(pages_dir)

        with pytest.raises(FileNotFoundError):
            store.load("Nowhere")

    def test__path_for__uses_txt_suffix(self, pages_dir: Path) -> None:
        store = PageStore(pages_dir)

        assert store.path_for("Alpha1") == pages_dir / "Alpha1.txt"
