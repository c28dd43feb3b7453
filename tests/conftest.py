"""Pytest configuration for docshome tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from docshome.models import FooterConfig, NavbarConfig, NavLink, SiteConfiguration
from docshome.view import PageView, ViewNode

SITE_YML = """\
title: Acme Docs
tagline: Docs for Acme
url: https://docs.acme.test
baseUrl: /
navbar:
  items:
    - label: Docs
      to: /docs/intro
footer:
  style: dark
  copyright: Copyright Acme
"""


class PassthroughLayout:
    """Layout that adds no chrome, so page content can be inspected directly."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, ViewNode]] = []

    def render_layout(self, title: str, description: str, body: ViewNode) -> PageView:
        self.calls.append((title, description, body))
        return PageView(title=title, description=description, body=body)


@pytest.fixture
def site_config() -> SiteConfiguration:
    """Provide a site configuration with navbar and footer chrome.

    Returns:
        Site configuration titled "Acme Docs"
    """
    return SiteConfiguration(
        title="Acme Docs",
        url="https://docs.acme.test",
        navbar=NavbarConfig(items=(NavLink(label="Docs", to="/docs/intro"),)),
        footer=FooterConfig(
            style="dark", links=(NavLink(label="GitHub", to="https://github.com/acme"),), copyright="Copyright Acme"
        ),
    )


@pytest.fixture
def passthrough_layout() -> PassthroughLayout:
    """Provide a layout that records its calls and adds no chrome.

    Returns:
        PassthroughLayout instance
    """
    return PassthroughLayout()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create a site root with site.yml and docs/intro.md.

    Args:
        tmp_path: Pytest temporary directory

    Returns:
        Path to the site root
    """
    root = tmp_path / "site"
    root.mkdir()
    (root / "site.yml").write_text(SITE_YML, encoding="utf-8")
    (root / "docs").mkdir()
    (root / "docs" / "intro.md").write_text("# Intro\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _clear_title_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a DOCSHOME_TITLE from the outer environment out of the tests.

    Args:
        monkeypatch: pytest fixture for monkey patching
    """
    monkeypatch.delenv("DOCSHOME_TITLE", raising=False)
