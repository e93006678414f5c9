"""Event model for view rendering diagnostics.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal

type RenderMode = Literal["page", "fragment"]


@dataclass(frozen=True, slots=True)
class ViewRegistered:
    """A view was compiled and added to the registry.

    Attributes:
        view: View name.
        origin: How the view was registered.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    view: str
    origin: Literal["explicit", "discovered", "main"]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ViewRendered:
    """A view rendered successfully.

    Attributes:
        view: View name.
        mode: Full page or fragment.
        path: Request URL path.
        duration_ms: Time spent producing data and rendering.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    view: str
    mode: RenderMode
    path: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ViewFailed:
    """A data source or template raised while rendering a view.

    Attributes:
        view: View name.
        mode: Full page or fragment.
        path: Request URL path.
        error_type: Exception class name.
        message: Exception message (also the 500 response body).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    view: str
    mode: RenderMode
    path: str
    error_type: str
    message: str
    timestamp_ns: int


type ViewEvent = ViewRegistered | ViewRendered | ViewFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
