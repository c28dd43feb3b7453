"""Route table for the pages this site renders."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import PurePosixPath

from docshome.layout import LayoutRenderer
from docshome.models import SiteConfiguration
from docshome.pages import home
from docshome.view import PageView

PageRenderer = Callable[[SiteConfiguration, LayoutRenderer], PageView]

ROUTES: dict[str, PageRenderer] = {home.ROUTE: home.render}

__all__ = ["ROUTES", "PageRenderer", "output_path_for"]


def output_path_for(route: str) -> PurePosixPath:
    """Map a route to the file that serves it from a static host.

    Args:
        route: Absolute route such as ``/`` or ``/blog/archive``

    Returns:
        Relative output path, ``index.html`` for the root

    Raises:
        ValueError: If the route is not absolute
    """
    if not route.startswith("/"):
        msg = f"Route must start with '/': {route!r}"
        raise ValueError(msg)
    parts = [part for part in route.split("/") if part]
    return PurePosixPath(*parts, "index.html")
