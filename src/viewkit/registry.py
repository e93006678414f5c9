"""View registry — named, compiled views and their data sources.

Each view is compiled into its own Kida ``Environment`` holding a private
parse of the shell plus the view's body, so views never share compiled
state.  Data sources are kept in a separate mapping so a template found by
discovery can be paired with a source registered earlier under the same name.

Registration is a single-threaded startup phase.  Once ``freeze()`` runs the
mappings are exposed read-only and may be read concurrently by any number
of request handlers.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from viewkit._errors import RegistryFrozenError, TemplateRegistrationError
from viewkit.discovery import reserved_files, tree_reader, walk
from viewkit.shell import BODY_BLOCK, SHELL_TEMPLATE, extend_shell

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from kida import Environment, Template

    from viewkit._types import DataSource, TemplateFunction, ViewName

# Reserved name of the full-page view
MAIN_VIEW = "main"

# Query parameter naming the view to render
VIEW_PARAM = "view"

# Bundled assets (core stylesheet and main layout), read-only package data
ASSETS_PATH = Path(__file__).parent / "assets"

_MAIN_LAYOUT_FILE = "main.html"
_MAIN_LAYOUT_TEMPLATE = "viewkit/main.html"


def query_params(request: Any) -> dict[str, str]:
    """Return the request's query parameters as a flat dict.

    Repeated keys collapse to the single value ``query.get`` returns.
    """
    query = request.query
    return {key: query.get(key) for key in query}


def passthrough_source(request: Any) -> dict[str, str]:
    """Default data source for discovered templates: the raw query parameters."""
    return query_params(request)


@dataclass(frozen=True, slots=True)
class View:
    """A compiled view ready to render.

    Attributes:
        name: Registry key.
        template: Compiled Kida template extending the shell.
        environment: The view's private Kida environment.  Templates only
            hold a weak reference to it, so the view keeps it alive.
        source: Data producer called once per render.
        fragment_block: Block rendered in fragment mode, or *None* to render
            the whole document.

    """

    name: ViewName
    template: Template
    environment: Environment
    source: DataSource
    fragment_block: str | None = BODY_BLOCK

    async def context(self, request: Any) -> dict[str, Any]:
        """Call the data source and build the template context.

        A mapping result is spread into template variables; any other value
        is exposed as ``data``.  ``request`` is always available.

        """
        value = self.source(request)
        if inspect.isawaitable(value):
            value = await value

        if isinstance(value, Mapping):
            ctx = dict(value)
        else:
            ctx = {"data": value}
        ctx.setdefault("request", request)
        return ctx

    async def render(self, request: Any, *, fragment: bool = False) -> str:
        """Render the full document, or just the fragment block."""
        ctx = await self.context(request)
        if fragment and self.fragment_block is not None:
            return self.template.render_block(self.fragment_block, ctx)
        return self.template.render(ctx)


class ViewRegistry:
    """Maps view names to compiled views.

    Args:
        shell: Shell template source every view extends.
        functions: Template functions bound before any template is parsed.
        templates_root: Folder scanned by ``discover_template_views()``.
        template_suffix: File suffix of discoverable templates.
        start_view: Default ``view`` parameter of the main view.
        assets: Folder holding the bundled main layout.

    """

    def __init__(
        self,
        shell: str,
        *,
        functions: Mapping[str, TemplateFunction] | None = None,
        templates_root: Path | Traversable | None = None,
        template_suffix: str = ".html",
        start_view: str = "",
        assets: Path | Traversable = ASSETS_PATH,
    ) -> None:
        self._shell = shell
        self._functions = dict(functions or {})
        self._functions.setdefault("basepath", lambda: "")
        self._templates_root = templates_root
        self._suffix = template_suffix
        self._start_view = start_view
        self._assets = assets
        self._views: dict[ViewName, View] = {}
        self._sources: dict[ViewName, DataSource] = {}
        self._frozen = False

    # -- lookup --

    @property
    def views(self) -> Mapping[ViewName, View]:
        """Read-only view of the registered views."""
        return MappingProxyType(self._views)

    @property
    def sources(self) -> Mapping[ViewName, DataSource]:
        """Read-only view of the registered data sources."""
        return MappingProxyType(self._sources)

    @property
    def shell(self) -> str:
        """Shell template source."""
        return self._shell

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: ViewName) -> View | None:
        return self._views.get(name)

    def names(self) -> list[ViewName]:
        """Registered view names, sorted."""
        return sorted(self._views)

    def __contains__(self, name: object) -> bool:
        return name in self._views

    def __len__(self) -> int:
        return len(self._views)

    # -- registration --

    def add_source(self, name: ViewName, source: DataSource) -> None:
        """Store a data source for a template that discovery will find later."""
        self._check_open()
        self._sources[name] = source

    def add_view(self, name: ViewName, template_text: str, source: DataSource) -> View:
        """Compile *template_text* as an extension of the shell under *name*.

        The source is stored as well, so a later discovered template with the
        same name reuses it.  Registering an existing name replaces it.

        Raises:
            TemplateRegistrationError: If the template does not compile or
                does not define a ``body`` block.

        """
        self._check_open()
        self._sources[name] = source
        return self._register(name, template_text, source)

    def register_main_view(self) -> View:
        """Compile the built-in main layout plus any reserved override files.

        Override files are the top-level templates whose name contains the
        reserved marker; they redefine blocks of the main layout (``header``,
        ``footer``).  Must run before ``discover_template_views()``.

        """
        self._check_open()
        layout = self._assets.joinpath(_MAIN_LAYOUT_FILE).read_text(encoding="utf-8")

        overrides = []
        if self._templates_root is not None:
            for entry in reserved_files(self._templates_root, self._suffix):
                try:
                    overrides.append(entry.read_text(encoding="utf-8"))
                except OSError as exc:
                    raise TemplateRegistrationError(
                        MAIN_VIEW, f"cannot read {entry.name}: {exc}"
                    ) from exc

        start_view = self._start_view

        def main_source(request: Any) -> dict[str, Any]:
            params = query_params(request)
            if not params.get(VIEW_PARAM):
                params[VIEW_PARAM] = start_view
            return {"params": params}

        templates = {
            _MAIN_LAYOUT_TEMPLATE: extend_shell(layout),
            MAIN_VIEW: extend_shell("\n".join(overrides), parent=_MAIN_LAYOUT_TEMPLATE),
        }
        env, template = self._compile(MAIN_VIEW, templates)
        view = View(
            name=MAIN_VIEW,
            template=template,
            environment=env,
            source=main_source,
            fragment_block=None,
        )
        self._views[MAIN_VIEW] = view
        return view

    def discover_template_views(self) -> list[View]:
        """Register one view per template file found under the templates root.

        View names are file names without their extension.  Each view uses
        the source registered under its name, or the query pass-through.

        Raises:
            TemplateRegistrationError: If a discovered template does not compile.

        """
        self._check_open()
        if self._templates_root is None:
            return []

        registered: list[View] = []
        for entry in walk(tree_reader(self._templates_root), "", self._suffix):
            name = PurePosixPath(entry).stem
            source = self._sources.get(name, passthrough_source)
            try:
                text = self._templates_root.joinpath(*entry.split("/")).read_text(
                    encoding="utf-8"
                )
            except OSError as exc:
                raise TemplateRegistrationError(name, f"cannot read {entry}: {exc}") from exc
            registered.append(self._register(name, text, source))
        return registered

    def freeze(self) -> None:
        """Seal the registry; later registration raises ``RegistryFrozenError``."""
        self._frozen = True

    # -- internals --

    def _check_open(self) -> None:
        if self._frozen:
            msg = "views cannot be registered after the registry is in service"
            raise RegistryFrozenError(msg)

    def _register(self, name: ViewName, template_text: str, source: DataSource) -> View:
        env, template = self._compile(name, {name: extend_shell(template_text)})
        if BODY_BLOCK not in template.list_blocks():
            raise TemplateRegistrationError(name, f"template must define a {BODY_BLOCK!r} block")
        view = View(name=name, template=template, environment=env, source=source)
        self._views[name] = view
        return view

    def _compile(
        self, name: ViewName, templates: dict[str, str]
    ) -> tuple[Environment, Template]:
        """Parse the shell plus *templates* in a fresh environment."""
        from kida import DictLoader, Environment

        env = Environment(
            loader=DictLoader({SHELL_TEMPLATE: self._shell, **templates}),
            autoescape=True,
        )
        for fn_name, fn in self._functions.items():
            env.add_global(fn_name, fn)

        try:
            return env, env.get_template(name)
        except Exception as exc:
            raise TemplateRegistrationError(name, str(exc)) from exc
