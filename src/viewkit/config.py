"""viewkit configuration.

ViewKitConfig is the central configuration object, frozen after creation.
"""

import posixpath
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from viewkit._errors import ConfigError
from viewkit._types import TemplateFunction


def normalize_path(path: str) -> str:
    """Clean a base path and strip its leading/trailing separators.

    ``"/app/"`` -> ``"app"``, ``"a//b/../c"`` -> ``"a/c"``, ``""`` -> ``""``

    """
    cleaned = posixpath.normpath("/" + path.strip()).strip("/")
    return "" if cleaned == "." else cleaned


@dataclass(frozen=True, slots=True)
class ViewKitConfig:
    """Configuration for a viewkit application.

    Attributes:
        path: Base path the dispatcher is mounted at.  Normalized on
              construction (no leading or trailing ``/``).
        title: Document title.  Empty means no ``<title>`` element.
        start_view: View the main page preloads when no ``view`` query
            parameter is given.
        functions: Template functions exposed to every view.  Copied into a
            read-only mapping that always includes ``basepath()``.
        root: Site root directory (contains templates/ and static/).
              Always resolved to an absolute path on construction.
        templates_dir: Directory containing view templates.
        static_dir: Directory containing static assets.
        template_suffix: File suffix of discoverable view templates.
        host: Bind address for ``serve``.
        port: Bind port for ``serve``.
        debug: Run chirp in debug mode.

    """

    path: str = ""
    title: str = ""
    start_view: str = ""
    functions: Mapping[str, TemplateFunction] = field(default_factory=dict)
    root: Path = field(default_factory=Path.cwd)
    templates_dir: str = "templates"
    static_dir: str = "static"
    template_suffix: str = ".html"
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.template_suffix.startswith("."):
            msg = f"template_suffix must start with '.', got {self.template_suffix!r}"
            raise ConfigError(msg)

        base = normalize_path(self.path)
        object.__setattr__(self, "path", base)

        functions = dict(self.functions)
        functions["basepath"] = lambda: base
        object.__setattr__(self, "functions", MappingProxyType(functions))

        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def templates_path(self) -> Path:
        """Absolute path to templates directory."""
        return self.root / self.templates_dir

    @property
    def static_path(self) -> Path:
        """Absolute path to static assets directory."""
        return self.root / self.static_dir

    @property
    def route(self) -> str:
        """URL path of the dispatcher endpoint."""
        return "/" + self.path
