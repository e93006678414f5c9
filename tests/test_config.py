"""Tests for viewkit.config."""

from pathlib import Path

import pytest

from viewkit._errors import ConfigError
from viewkit.config import ViewKitConfig, normalize_path


class TestNormalizePath:
    """normalize_path — cleaned, no leading or trailing separators."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", ""),
            ("/", ""),
            (".", ""),
            ("app", "app"),
            ("/app/", "app"),
            ("//app//views/", "app/views"),
            ("a/b/../c", "a/c"),
            ("/../app", "app"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_path(raw) == expected


class TestViewKitConfig:
    """ViewKitConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = ViewKitConfig()
        assert config.path == ""
        assert config.title == ""
        assert config.start_view == ""
        assert config.templates_dir == "templates"
        assert config.static_dir == "static"
        assert config.template_suffix == ".html"
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.debug is False

    def test_frozen(self) -> None:
        config = ViewKitConfig()
        with pytest.raises(AttributeError):
            config.port = 8000  # type: ignore[misc]

    def test_path_normalized(self) -> None:
        config = ViewKitConfig(path="/dashboard/")
        assert config.path == "dashboard"
        assert config.route == "/dashboard"

    def test_empty_path_routes_to_root(self) -> None:
        assert ViewKitConfig().route == "/"

    def test_basepath_function_injected(self) -> None:
        config = ViewKitConfig(path="/app/")
        assert config.functions["basepath"]() == "app"

    def test_caller_functions_kept_and_not_mutated(self) -> None:
        def shout(s: str) -> str:
            return s.upper()

        functions = {"shout": shout}
        config = ViewKitConfig(functions=functions)
        assert config.functions["shout"] is shout
        assert "basepath" in config.functions
        assert "basepath" not in functions

    def test_functions_read_only(self) -> None:
        config = ViewKitConfig()
        with pytest.raises(TypeError):
            config.functions["extra"] = len  # type: ignore[index]

    def test_paths_resolve_from_root(self, tmp_path: Path) -> None:
        config = ViewKitConfig(root=tmp_path)
        assert config.templates_path == tmp_path / "templates"
        assert config.static_path == tmp_path / "static"

    def test_custom_dirs(self, tmp_path: Path) -> None:
        config = ViewKitConfig(root=tmp_path, templates_dir="views", static_dir="assets")
        assert config.templates_path == tmp_path / "views"
        assert config.static_path == tmp_path / "assets"

    def test_relative_root_resolved_to_absolute(self) -> None:
        config = ViewKitConfig(root=Path("site"))
        assert config.root.is_absolute()

    def test_suffix_must_start_with_dot(self) -> None:
        with pytest.raises(ConfigError, match="template_suffix"):
            ViewKitConfig(template_suffix="html")
