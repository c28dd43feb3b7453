"""Tests for the landing page.

Tests cover:
- Page metadata derived from the site title
- Fixed heading, paragraphs and documentation link
- Determinism and independence of repeated renders
"""

from __future__ import annotations

import pytest
from docshome.layout import SiteLayout
from docshome.models import SiteConfiguration
from docshome.pages import home
from docshome.view import find_all, text_content

from tests.conftest import PassthroughLayout

WELCOME = (
    "This site hosts the documentation for the Cursor AI Rules. "
    "Learn how to set up and use the rules to enhance your AI workflows."
)


class TestHomePageMetadata:
    """Test suite for the title and description handed to the layout."""

    @pytest.mark.parametrize("title", ["Acme Docs", "", "Docs <beta> & more"])
    def test_title_is_prefixed_site_title(self, title: str, passthrough_layout: PassthroughLayout) -> None:
        """Test page title is "Hello from " followed by the site title.

        Tests: render() title for ordinary, empty and markup-like titles
        How: Render with a passthrough layout and read the page title
        Why: The page title is the only value derived from configuration

        Args:
            title: Site title under test
            passthrough_layout: Layout that adds no chrome
        """
        # Act
        page = home.render(SiteConfiguration(title=title), passthrough_layout)

        # Assert
        assert page.title == f"Hello from {title}"

    def test_description_is_fixed(self, passthrough_layout: PassthroughLayout) -> None:
        """Test description is the fixed head meta text."""
        page = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        assert page.description == "Description will go into a meta tag in <head />"

    def test_layout_called_once(self, passthrough_layout: PassthroughLayout) -> None:
        """Test render delegates to the layout exactly once."""
        home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        assert len(passthrough_layout.calls) == 1
        assert passthrough_layout.calls[0][0] == "Hello from Acme Docs"


class TestHomePageBody:
    """Test suite for the page content."""

    def test_single_heading(self, passthrough_layout: PassthroughLayout) -> None:
        """Test body has exactly one h1 with the welcome text."""
        page = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        headings = find_all(page.body, "h1")
        assert len(headings) == 1
        assert text_content(headings[0]) == "Welcome to the Docusaurus Site!"

    def test_paragraphs_verbatim(self, passthrough_layout: PassthroughLayout) -> None:
        """Test both paragraphs carry their fixed text."""
        page = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        paragraphs = [text_content(p) for p in find_all(page.body, "p")]
        assert paragraphs == [WELCOME, "Check out the documentation to get started."]

    def test_single_docs_link(self, passthrough_layout: PassthroughLayout) -> None:
        """Test body has exactly one link, to /docs/intro, reading "documentation"."""
        page = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        links = find_all(page.body, "a")
        assert len(links) == 1
        assert links[0].attrs == {"href": "/docs/intro"}
        assert links[0].children == ["documentation"]

    def test_link_surrounded_by_text(self, passthrough_layout: PassthroughLayout) -> None:
        """Test link paragraph keeps its prefix and suffix as separate text nodes."""
        page = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        link_paragraph = find_all(page.body, "p")[1]
        assert link_paragraph.children[0] == "Check out the "
        assert link_paragraph.children[2] == " to get started."

    def test_centered_block_style(self, passthrough_layout: PassthroughLayout) -> None:
        """Test content sits in a flex-centered block half the viewport high."""
        page = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        assert page.body.tag == "main"
        block = page.body.children[0]
        assert not isinstance(block, str)
        assert block.style == {
            "display": "flex",
            "justify-content": "center",
            "align-items": "center",
            "height": "50vh",
            "font-size": "20px",
        }

    def test_empty_title_keeps_body(self, passthrough_layout: PassthroughLayout) -> None:
        """Test an empty title changes nothing but the page title.

        Tests: render() with title=""
        How: Compare bodies rendered with an empty and a non-empty title
        Why: The body never depends on configuration
        """
        empty = home.render(SiteConfiguration(title=""), passthrough_layout)
        named = home.render(SiteConfiguration(title="Acme Docs"), passthrough_layout)

        assert empty.title == "Hello from "
        assert empty.body == named.body


class TestHomePageDeterminism:
    """Test suite for repeated renders."""

    def test_render_is_idempotent(self, site_config: SiteConfiguration) -> None:
        """Test two renders with the same configuration are structurally equal."""
        layout = SiteLayout(site_config)

        assert home.render(site_config, layout) == home.render(site_config, layout)

    def test_render_returns_fresh_tree(self, passthrough_layout: PassthroughLayout) -> None:
        """Test mutating one render's tree does not leak into the next."""
        config = SiteConfiguration(title="Acme Docs")
        first = home.render(config, passthrough_layout)
        first.body.children.clear()

        second = home.render(config, passthrough_layout)

        assert len(find_all(second.body, "h1")) == 1
        assert find_all(second.body, "div")[0].style["height"] == "50vh"

    def test_route_is_root(self) -> None:
        """Test the page is mounted at the site root."""
        assert home.ROUTE == "/"


class TestHomePageWithSiteLayout:
    """Test suite for the page rendered through the default layout."""

    def test_docs_link_unique_with_chrome(self, site_config: SiteConfiguration) -> None:
        """Test chrome adds no second "documentation" link to /docs/intro."""
        page = home.render(site_config, SiteLayout(site_config))

        matches = [
            a
            for a in find_all(page.body, "a")
            if a.attrs.get("href") == "/docs/intro" and text_content(a) == "documentation"
        ]
        assert len(matches) == 1
        assert len(find_all(page.body, "h1")) == 1
