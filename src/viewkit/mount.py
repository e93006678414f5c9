"""Route and asset mounting on a Chirp app.

    GET /<path>        -> dispatcher (full page or fragment)
    GET /favicon.ico   -> static/favicon.ico, or 204 when there is none
    GET /static/*      -> the application's static assets
    GET /viewkit/*     -> viewkit's bundled assets (style.css, main.html)

Must run before the Chirp app is frozen (before the first request).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from viewkit.registry import ASSETS_PATH

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from pathlib import Path

    from chirp import App, Request
    from chirp.http.response import Response

    from viewkit.dispatcher import Dispatcher

FAVICON_PATH = "/favicon.ico"
STATIC_PREFIX = "/static"
ASSETS_PREFIX = "/viewkit"

FAVICON_CACHE_CONTROL = "public, max-age=86400"


def make_favicon_handler(static_root: Path) -> Callable[[Request], Awaitable[Response]]:
    """Create a handler serving ``favicon.ico`` from *static_root*.

    The file is looked up on every request so a favicon added after startup
    is picked up.  Absence is not an error: the handler answers 204.

    """
    favicon = static_root / "favicon.ico"

    async def favicon_handler(request: Request) -> Response:
        from chirp.http.response import Response

        try:
            data = favicon.read_bytes()
        except OSError:
            return Response(body=b"", status=204)

        return Response(
            body=data,
            status=200,
            content_type="image/x-icon",
        ).with_header("Cache-Control", FAVICON_CACHE_CONTROL)

    favicon_handler.__name__ = "viewkit_favicon"
    favicon_handler.__qualname__ = "viewkit.favicon"
    return favicon_handler


def mount_dispatcher(app: App, route: str, dispatcher: Dispatcher) -> None:
    """Register the dispatcher at *route*."""

    async def view_handler(request: Request) -> Response:
        return await dispatcher.handle(request)

    view_handler.__name__ = "viewkit_views"
    view_handler.__qualname__ = "viewkit.views"

    app.route(route, name="viewkit:views")(view_handler)


def mount_assets(app: App, static_root: Path) -> None:
    """Mount the favicon handler and both static file trees.

    The application's static tree is skipped when it does not exist; the
    bundled assets are always mounted.

    """
    from chirp.middleware import StaticFiles

    app.route(FAVICON_PATH, name="viewkit:favicon")(make_favicon_handler(static_root))

    if static_root.is_dir():
        app.add_middleware(StaticFiles(directory=static_root, prefix=STATIC_PREFIX))
    app.add_middleware(StaticFiles(directory=ASSETS_PATH, prefix=ASSETS_PREFIX))
