"""Render diagnostics — an in-memory log of view events.

Quick Start:
    >>> from viewkit.observability import EventLog
    >>> log = EventLog()
    >>> viewer = viewkit.new(config, event_log=log)
    >>> log.query(event_type=ViewFailed)

"""

from viewkit.observability.events import (
    ViewEvent,
    ViewFailed,
    ViewRegistered,
    ViewRendered,
    now_ns,
)
from viewkit.observability.log import EventLog

__all__ = [
    "EventLog",
    "ViewEvent",
    "ViewFailed",
    "ViewRegistered",
    "ViewRendered",
    "now_ns",
]
