"""Page layout: wraps page content in the site navbar and footer."""

from __future__ import annotations

from typing import Protocol

from docshome.models import NavLink, SiteConfiguration
from docshome.view import PageView, ViewNode, h


class LayoutRenderer(Protocol):
    """Protocol for layouts that turn page content into a full page view."""

    def render_layout(self, title: str, description: str, body: ViewNode) -> PageView:
        """Compose a page view.

        Args:
            title: Page title for the document head
            description: Page description for the document head
            body: Page-specific content

        Returns:
            Page view with the given metadata and chrome around ``body``
        """
        ...


def _link(link: NavLink, class_name: str) -> ViewNode:
    return h("a", link.label, href=link.to, class_=class_name)


class SiteLayout:
    """Default layout built from the site configuration."""

    site_config: SiteConfiguration

    def __init__(self, site_config: SiteConfiguration):
        """Initialize layout.

        Args:
            site_config: Site configuration providing navbar and footer settings
        """
        self.site_config = site_config

    def navbar(self) -> ViewNode:
        """Build the navbar.

        Returns:
            ``nav`` node with the brand link followed by the configured items
        """
        navbar = self.site_config.navbar
        brand = h("a", navbar.title or self.site_config.title, href="/", class_="navbar__brand")
        items = [_link(item, "navbar__item navbar__link") for item in navbar.items]
        return h("nav", brand, *items, class_="navbar")

    def footer(self) -> ViewNode:
        """Build the footer.

        Returns:
            ``footer`` node with the configured links and copyright
        """
        footer = self.site_config.footer
        children: list[ViewNode | str] = []
        if footer.links:
            links = [_link(link, "footer__link-item") for link in footer.links]
            children.append(h("div", *links, class_="footer__links"))
        if footer.copyright:
            children.append(h("div", footer.copyright, class_="footer__copyright"))
        return h("footer", *children, class_=f"footer footer--{footer.style}")

    def render_layout(self, title: str, description: str, body: ViewNode) -> PageView:
        """Wrap page content in site chrome.

        Args:
            title: Page title, passed through unchanged
            description: Page description, passed through unchanged
            body: Page-specific content

        Returns:
            Page view whose body is a ``div.main-wrapper``
        """
        wrapper = h("div", self.navbar(), body, self.footer(), class_="main-wrapper")
        return PageView(title=title, description=description, body=wrapper)
