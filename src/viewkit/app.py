"""viewkit application — Chirp app wiring and the public entry points.

``create_app`` builds a Chirp App around a Viewer.  ``serve`` and ``check``
load a site directory (``templates/``, ``static/``, optional
``viewkit.toml``) and either run it or validate its templates.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING

from viewkit.config_loader import load_config
from viewkit.viewer import Viewer

if TYPE_CHECKING:
    from chirp import App

    from viewkit.config import ViewKitConfig


def create_chirp_app(config: ViewKitConfig) -> App:
    """Create an empty Chirp App configured from *config*."""
    from chirp import App, AppConfig

    app_config = AppConfig(
        template_dir=config.templates_path,
        debug=config.debug,
        host=config.host,
        port=config.port,
    )
    return App(config=app_config)


def create_app(viewer: Viewer) -> App:
    """Create a Chirp App with *viewer*'s views and assets mounted.

    Raises:
        TemplateRegistrationError: If any template does not compile.

    """
    app = create_chirp_app(viewer.config)
    viewer.inject(app)
    return app


def check(root: str | Path = ".", **kwargs: object) -> list[str]:
    """Compile every view of the site at *root* and return their names.

    Args:
        root: Path to the site root directory.
        **kwargs: Override ViewKitConfig fields.

    Raises:
        TemplateRegistrationError: If any template does not compile.

    """
    config = load_config(Path(root), **kwargs)
    viewer = Viewer(config)
    viewer.load_views()
    return viewer.registry.names()


def serve(root: str | Path = ".", **kwargs: object) -> None:
    """Run the site at *root* with Chirp's server.

    Discovered templates use the query pass-through data source; applications
    needing their own sources build a Viewer and call ``create_app`` instead.

    Args:
        root: Path to the site root directory.
        **kwargs: Override ViewKitConfig fields.

    """
    from viewkit.banner import print_banner

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    viewer = Viewer(config)
    app = create_app(viewer)

    load_ms = (time.perf_counter() - t0) * 1000
    print_banner(config, viewer.registry.names(), load_ms=load_ms)

    app.run(host=config.host, port=config.port)
