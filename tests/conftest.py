"""Shared test fixtures for viewkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from viewkit.config import ViewKitConfig


@dataclass(frozen=True, slots=True)
class FakeRequest:
    """Minimal stand-in for a Chirp request: headers, query and path."""

    query: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    path: str = "/"


def page_request(**query: str) -> FakeRequest:
    """A first-load request (no marker header)."""
    return FakeRequest(query=query)


def fragment_request(**query: str) -> FakeRequest:
    """A partial-refresh request carrying the marker header."""
    return FakeRequest(query=query, headers={"X-Content-Request": "true"})


def body_text(response: object) -> str:
    body = response.body  # type: ignore[attr-defined]
    return body.decode() if isinstance(body, bytes) else body


@pytest.fixture
def tmp_site(tmp_path: Path) -> Path:
    """Create a minimal site structure for testing.

    Returns the path to the site root with templates/ and static/ dirs.
    """
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "inbox.html").write_text(
        "{% block body %}<ul id=\"inbox\">{{ q | default('all') }}</ul>{% endblock %}\n"
    )
    (templates / "main-header.html").write_text(
        "{% block header %}<header>Site header</header>{% endblock %}\n"
    )

    static = tmp_path / "static"
    static.mkdir()
    (static / "app.css").write_text("body { margin: 0; }\n")

    return tmp_path


@pytest.fixture
def site_config(tmp_site: Path) -> ViewKitConfig:
    return ViewKitConfig(root=tmp_site, title="Test Site", start_view="inbox")
