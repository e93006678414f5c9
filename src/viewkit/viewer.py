"""Viewer — the registration API an application uses.

    viewer = viewkit.new(ViewKitConfig(title="Inbox", start_view="messages"))
    viewer.add_source("messages", load_messages)        # pairs with templates/messages.html
    viewer.add_view("about", ABOUT_TEMPLATE, lambda request: {})
    viewer.inject(app)                                  # registers main + discovered views

All registration must happen before ``inject()``.  ``inject()`` seals the
registry and mounts the dispatcher, favicon and static assets on the app.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from viewkit.dispatcher import Dispatcher
from viewkit.mount import mount_assets, mount_dispatcher
from viewkit.observability.events import ViewRegistered, now_ns
from viewkit.registry import ViewRegistry
from viewkit.shell import aggregate_styles, build_shell

if TYPE_CHECKING:
    from typing import Literal

    from chirp import App

    from viewkit._types import DataSource, ViewName
    from viewkit.config import ViewKitConfig
    from viewkit.observability.log import EventLog
    from viewkit.registry import View


class Viewer:
    """Registers views and wires them into a Chirp app.

    The shell is built once here, from the configured title and every
    stylesheet found under the static root.

    Args:
        config: Frozen viewkit configuration.
        event_log: Optional log receiving registration and render events.

    """

    def __init__(self, config: ViewKitConfig, *, event_log: EventLog | None = None) -> None:
        self._config = config
        self._event_log = event_log
        shell = build_shell(config.title, aggregate_styles(config.static_path))
        self._registry = ViewRegistry(
            shell,
            functions=config.functions,
            templates_root=config.templates_path,
            template_suffix=config.template_suffix,
            start_view=config.start_view,
        )
        self._dispatcher = Dispatcher(self._registry, event_log=event_log)

    @property
    def config(self) -> ViewKitConfig:
        return self._config

    @property
    def registry(self) -> ViewRegistry:
        return self._registry

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def add_source(self, name: ViewName, source: DataSource) -> None:
        """Register a data source for a template discovered at ``inject()``."""
        self._registry.add_source(name, source)

    def add_view(self, name: ViewName, template_text: str, source: DataSource) -> View:
        """Register a view from template text.

        Raises:
            TemplateRegistrationError: If the template does not compile.

        """
        view = self._registry.add_view(name, template_text, source)
        self._record(view.name, "explicit")
        return view

    def load_views(self) -> list[View]:
        """Register the main view, then every template under ``templates/``.

        Raises:
            TemplateRegistrationError: If any template does not compile.

        """
        main = self._registry.register_main_view()
        self._record(main.name, "main")
        discovered = self._registry.discover_template_views()
        for view in discovered:
            self._record(view.name, "discovered")
        return [main, *discovered]

    def inject(self, app: App) -> None:
        """Load all views, seal the registry and mount routes on *app*.

        Raises:
            TemplateRegistrationError: If any template does not compile.

        """
        self.load_views()
        self._registry.freeze()
        mount_dispatcher(app, self._config.route, self._dispatcher)
        mount_assets(app, self._config.static_path)

    def _record(
        self, view: ViewName, origin: Literal["explicit", "discovered", "main"]
    ) -> None:
        if self._event_log is not None:
            self._event_log.append(ViewRegistered(view=view, origin=origin, timestamp_ns=now_ns()))


def new(config: ViewKitConfig, *, event_log: EventLog | None = None) -> Viewer:
    """Create a Viewer for *config*."""
    return Viewer(config, event_log=event_log)
