"""Tests for viewkit.discovery — the asset tree walker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from viewkit.discovery import is_reserved, reserved_files, tree_reader, walk


@dataclass(frozen=True, slots=True)
class _Entry:
    name: str
    folder: bool = False

    def is_dir(self) -> bool:
        return self.folder


def _touch(path: Path, text: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestIsReserved:
    """is_reserved — the single rule for main-layout names."""

    def test_reserved_names(self) -> None:
        assert is_reserved("main.html")
        assert is_reserved("main-header.html")
        assert is_reserved("domain.css")
        assert is_reserved("main")

    def test_ordinary_names(self) -> None:
        assert not is_reserved("inbox.html")
        assert not is_reserved("Main.html")


class TestWalk:
    """walk — recursive, suffix-filtered, best-effort listing."""

    def test_flat_folder(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a.css")
        _touch(tmp_path / "b.css")
        _touch(tmp_path / "notes.txt")
        assert walk(tree_reader(tmp_path), "", ".css") == ["a.css", "b.css"]

    def test_recurses_into_subfolders(self, tmp_path: Path) -> None:
        _touch(tmp_path / "base.css")
        _touch(tmp_path / "components" / "button.css")
        _touch(tmp_path / "components" / "forms" / "input.css")
        result = walk(tree_reader(tmp_path), "", ".css")
        assert result == [
            "base.css",
            "components/button.css",
            "components/forms/input.css",
        ]

    def test_folder_prefix_kept(self, tmp_path: Path) -> None:
        _touch(tmp_path / "static" / "css" / "site.css")
        result = walk(tree_reader(tmp_path), "static", ".css")
        assert result == ["static/css/site.css"]

    def test_reserved_files_skipped(self, tmp_path: Path) -> None:
        _touch(tmp_path / "inbox.html")
        _touch(tmp_path / "main-header.html")
        _touch(tmp_path / "main.html")
        assert walk(tree_reader(tmp_path), "", ".html") == ["inbox.html"]

    def test_reserved_folders_skipped(self, tmp_path: Path) -> None:
        _touch(tmp_path / "main" / "inside.html")
        _touch(tmp_path / "partials" / "card.html")
        assert walk(tree_reader(tmp_path), "", ".html") == ["partials/card.html"]

    def test_missing_root_yields_nothing(self, tmp_path: Path) -> None:
        assert walk(tree_reader(tmp_path / "missing"), "", ".css") == []

    def test_root_is_a_file_yields_nothing(self, tmp_path: Path) -> None:
        _touch(tmp_path / "file.css")
        assert walk(tree_reader(tmp_path / "file.css"), "", ".css") == []

    def test_unreadable_subfolder_skipped_silently(self) -> None:
        tree = {
            "": [_Entry("ok.css"), _Entry("locked", folder=True), _Entry("z.css")],
        }

        def read_dir(folder: str) -> list[_Entry]:
            if folder not in tree:
                raise PermissionError(folder)
            return tree[folder]

        assert walk(read_dir, "", ".css") == ["ok.css", "z.css"]

    def test_listing_order_preserved(self) -> None:
        def read_dir(folder: str) -> list[_Entry]:
            return [_Entry("b.css"), _Entry("a.css")]

        assert walk(read_dir, "", ".css") == ["b.css", "a.css"]

    def test_suffix_must_match_end(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a.css.map")
        _touch(tmp_path / "b.css")
        assert walk(tree_reader(tmp_path), "", ".css") == ["b.css"]


class TestReservedFiles:
    """reserved_files — top-level main-layout overrides."""

    def test_lists_sorted_overrides(self, tmp_path: Path) -> None:
        _touch(tmp_path / "main-footer.html")
        _touch(tmp_path / "main-header.html")
        _touch(tmp_path / "inbox.html")
        _touch(tmp_path / "main-notes.txt")
        names = [entry.name for entry in reserved_files(tmp_path, ".html")]
        assert names == ["main-footer.html", "main-header.html"]

    def test_not_recursive(self, tmp_path: Path) -> None:
        _touch(tmp_path / "nested" / "main-header.html")
        assert reserved_files(tmp_path, ".html") == []

    def test_missing_root(self, tmp_path: Path) -> None:
        assert reserved_files(tmp_path / "missing", ".html") == []
