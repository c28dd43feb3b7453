"""HTML serialization of page views."""

from __future__ import annotations

import htpy
from jinja2 import Environment
from markupsafe import Markup

from docshome.models import SiteConfiguration
from docshome.templates import PAGE_HTML_TEMPLATE
from docshome.view import PageView, ViewNode

_env = Environment(keep_trailing_newline=True, autoescape=True)


def resolve_href(href: str, base_url: str = "/") -> str:
    """Prefix a root-relative link with the site base URL.

    Args:
        href: Link destination
        base_url: Normalized base URL (begins and ends with ``/``)

    Returns:
        ``href`` under ``base_url`` if it is root-relative, otherwise unchanged
    """
    if base_url == "/" or not href.startswith("/") or href.startswith("//"):
        return href
    return base_url.rstrip("/") + href


def _format_style(style: dict[str, str]) -> str:
    return " ".join(f"{name}: {value};" for name, value in style.items())


def _to_element(node: ViewNode, base_url: str) -> htpy.Element | htpy.VoidElement:
    attrs = dict(node.attrs)
    if "href" in attrs:
        attrs["href"] = resolve_href(attrs["href"], base_url)
    if node.style:
        attrs["style"] = _format_style(node.style)

    element = getattr(htpy, node.tag)
    if attrs:
        element = element(attrs)
    if node.children:
        element = element[
            [child if isinstance(child, str) else _to_element(child, base_url) for child in node.children]
        ]
    return element


def render_node(node: ViewNode, base_url: str = "/") -> Markup:
    """Serialize a view tree to HTML.

    Each node becomes the htpy element of the same name, so escaping and
    void elements follow htpy.

    Args:
        node: Root of the tree
        base_url: Site base URL applied to root-relative ``href`` values

    Returns:
        Escaped HTML markup
    """
    return Markup(str(_to_element(node, base_url)))


def document_title(page: PageView, site_config: SiteConfiguration) -> str:
    """Compute the text of the document ``<title>``.

    Args:
        page: Rendered page
        site_config: Site configuration

    Returns:
        ``"<page> | <site>"`` when both are set and differ, else whichever is set
    """
    if page.title and site_config.title and page.title != site_config.title:
        return f"{page.title} | {site_config.title}"
    return page.title or site_config.title


def _favicon_href(site_config: SiteConfiguration) -> str | None:
    favicon = site_config.favicon
    if not favicon:
        return None
    if "://" in favicon:
        return favicon
    return resolve_href("/" + favicon.lstrip("/"), site_config.base_url)


def render_document(page: PageView, site_config: SiteConfiguration, route: str = "/") -> str:
    """Render a complete HTML5 document for a page.

    The site tagline stands in for the meta description when the page has none.

    Args:
        page: Page view produced by a layout
        site_config: Site configuration
        route: Route the page is mounted at, used for the canonical link

    Returns:
        HTML document text
    """
    canonical_url = None
    if site_config.url:
        canonical_url = site_config.url + resolve_href(route, site_config.base_url)

    template = _env.from_string(PAGE_HTML_TEMPLATE)
    return template.render(
        description=page.description or site_config.tagline or "",
        document_title=document_title(page, site_config),
        canonical_url=canonical_url,
        favicon=_favicon_href(site_config),
        body=render_node(page.body, site_config.base_url),
    )
