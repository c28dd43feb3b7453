"""Landing page mounted at the site root."""

from __future__ import annotations

from docshome.layout import LayoutRenderer
from docshome.models import SiteConfiguration
from docshome.view import PageView, h

ROUTE = "/"
DESCRIPTION = "Description will go into a meta tag in <head />"

HERO_STYLE = {
    "display": "flex",
    "justify-content": "center",
    "align-items": "center",
    "height": "50vh",
    "font-size": "20px",
}


def render(site_config: SiteConfiguration, layout: LayoutRenderer) -> PageView:
    """Render the landing page.

    Only ``site_config.title`` is read. A new tree is built on every call.

    Args:
        site_config: Site configuration
        layout: Layout that adds the document head metadata and site chrome

    Returns:
        The page view produced by ``layout``
    """
    content = h(
        "main",
        h(
            "div",
            h(
                "div",
                h("h1", "Welcome to the Docusaurus Site!"),
                h(
                    "p",
                    "This site hosts the documentation for the Cursor AI Rules. "
                    "Learn how to set up and use the rules to enhance your AI workflows.",
                ),
                h("p", "Check out the ", h("a", "documentation", href="/docs/intro"), " to get started."),
            ),
            style=HERO_STYLE,
        ),
    )
    return layout.render_layout(f"Hello from {site_config.title}", DESCRIPTION, content)
