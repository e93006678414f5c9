"""Dispatcher — the single HTTP entry point for all views.

Two modes, chosen per request by the ``X-Content-Request`` header:

    header absent / not "true"  -> full page: render the ``main`` view
    header "true"               -> fragment: render the view named by ``?view=``

Unknown fragment names are a client error (400).  Any exception raised by a
data source or template while rendering becomes a 500 whose body is the
error message.  Failures are logged at debug level and never retried.

Thread Safety:
    The dispatcher only reads the (frozen) registry.  All per-request state
    is local to ``handle()``.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from viewkit.observability.events import ViewFailed, ViewRendered, now_ns
from viewkit.registry import MAIN_VIEW, VIEW_PARAM

if TYPE_CHECKING:
    from chirp.http.response import Response

    from viewkit.observability.events import RenderMode
    from viewkit.observability.log import EventLog
    from viewkit.registry import View, ViewRegistry

logger = logging.getLogger(__name__)

# Marker header selecting fragment mode
CONTENT_REQUEST_HEADER = "X-Content-Request"

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def is_fragment_request(request: Any) -> bool:
    """Return True if the request asks for a fragment instead of a full page."""
    value = request.headers.get(CONTENT_REQUEST_HEADER)
    return value is not None and value.strip().lower() == "true"


class Dispatcher:
    """Routes a request to the main view or to a single fragment.

    Args:
        registry: Registry holding the compiled views.
        event_log: Optional log receiving a render event per request.

    """

    def __init__(self, registry: ViewRegistry, event_log: EventLog | None = None) -> None:
        self._registry = registry
        self._event_log = event_log

    async def handle(self, request: Any) -> Response:
        """Serve *request* as a full page or a fragment."""
        from chirp.http.response import Response

        if not is_fragment_request(request):
            view = self._registry.get(MAIN_VIEW)
            if view is None:
                return Response(
                    body=f"Unknown view: {MAIN_VIEW}",
                    status=400,
                    content_type=TEXT_CONTENT_TYPE,
                )
            return await self._render(view, request, mode="page")

        key = request.query.get(VIEW_PARAM) or ""
        view = self._registry.get(key)
        if view is None:
            return Response(
                body=f"Unknown view: {key}",
                status=400,
                content_type=TEXT_CONTENT_TYPE,
            )
        return await self._render(view, request, mode="fragment")

    async def _render(self, view: View, request: Any, *, mode: RenderMode) -> Response:
        from chirp.http.response import Response

        path = str(getattr(request, "path", ""))
        t0 = time.perf_counter()
        try:
            body = await view.render(request, fragment=mode == "fragment")
        except Exception as exc:
            logger.debug(
                "failed to execute template %r for %s (%s)",
                view.name, path, mode, exc_info=exc,
            )
            if self._event_log is not None:
                self._event_log.append(ViewFailed(
                    view=view.name,
                    mode=mode,
                    path=path,
                    error_type=type(exc).__name__,
                    message=str(exc),
                    timestamp_ns=now_ns(),
                ))
            return Response(body=str(exc), status=500, content_type=TEXT_CONTENT_TYPE)

        if self._event_log is not None:
            self._event_log.append(ViewRendered(
                view=view.name,
                mode=mode,
                path=path,
                duration_ms=(time.perf_counter() - t0) * 1000,
                timestamp_ns=now_ns(),
            ))
        return Response(body=body, status=200, content_type=HTML_CONTENT_TYPE)
