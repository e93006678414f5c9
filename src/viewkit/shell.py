"""Outer shell — the HTML document every view extends.

The shell is built once from the configuration (title and the stylesheets
found under the static root) and reused as the parent template of every
view.  Views supply its ``body`` block.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from viewkit.discovery import tree_reader, walk

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

# Template name the shell is registered under in every view environment
SHELL_TEMPLATE = "viewkit/shell.html"

# Block every view template must define
BODY_BLOCK = "body"

# Stylesheet bundled with viewkit, served under /viewkit/
CORE_STYLESHEET = "/viewkit/style.css"

_SHELL = """\
<!DOCTYPE html>
<html>
  <head>
    {title}<link rel="stylesheet" href="{core}">{styles}
  </head>
  <body>
    {{% block {body} %}}{{% endblock %}}
  </body>
</html>
"""


def wrap_title(title: str) -> str:
    """Return a ``<title>`` element for *title*, or ``""`` when it is empty."""
    if not title:
        return ""
    return f"<title>{html.escape(title)}</title>\n    "


def aggregate_styles(static_root: Path | Traversable, prefix: str = "static") -> str:
    """Return one ``<link>`` tag per ``.css`` file under *static_root*.

    Each tag is preceded by a newline and a tab.  Hrefs are rooted at
    ``/<prefix>/``, where the static files are mounted.

    """
    styles = ""
    for entry in walk(tree_reader(static_root), "", ".css"):
        styles += f'\n\t<link rel="stylesheet" href="/{prefix}/{entry}">'
    return styles


def build_shell(title: str, styles: str) -> str:
    """Build the shell template source."""
    return _SHELL.format(
        title=wrap_title(title),
        core=CORE_STYLESHEET,
        styles=styles,
        body=BODY_BLOCK,
    )


def extend_shell(source: str, parent: str = SHELL_TEMPLATE) -> str:
    """Compose *source* as a child of *parent* (the shell by default)."""
    return f'{{% extends "{parent}" %}}\n{source}'
