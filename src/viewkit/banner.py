"""Startup banner — status output for ``viewkit serve``.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from viewkit.config import ViewKitConfig


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""


def format_banner(
    config: ViewKitConfig,
    views: list[str],
    *,
    load_ms: float = 0.0,
) -> str:
    """Return the banner text.

    Args:
        config: Resolved ViewKitConfig.
        views: Names of the registered views.
        load_ms: Time spent compiling views in milliseconds.

    """
    from viewkit import __version__

    lines: list[str] = [
        "",
        f"  {_BOLD}viewkit{_RESET} {_DIM}v{__version__}{_RESET}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    views_label = "view" if len(views) == 1 else "views"
    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(f"  {_DIM}├─{_RESET} {len(views)} {views_label} compiled{timing}")
    if views:
        lines.append(f"  {_DIM}│  {', '.join(views)}{_RESET}")
    lines.append(f"  {_DIM}├─{_RESET} templates: {_DIM}{config.templates_path}{_RESET}")
    lines.append(f"  {_DIM}└─{_RESET} static: {_DIM}{config.static_path}{_RESET}")

    url = f"http://{config.host}:{config.port}{config.route}"
    lines.append("")
    lines.append(f"  {_CYAN}{url}{_RESET}")
    lines.append("")

    return "\n".join(lines)


def print_banner(
    config: ViewKitConfig,
    views: list[str],
    *,
    load_ms: float = 0.0,
) -> None:
    """Print the startup banner to stderr."""
    print(format_banner(config, views, load_ms=load_ms), file=sys.stderr)
