"""Builder and preview server logic for docshome."""

from __future__ import annotations

import shutil
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import IO, Any

from rich.console import Console

from docshome.config import SITE_CONFIG_FILE, load_site_config
from docshome.layout import SiteLayout
from docshome.pages import ROUTES, output_path_for
from docshome.renderer import render_document

# Initialize Rich console
console = Console()
BUILD_DIR = "build"


def _check_clean_target(site_root: Path, out: Path) -> None:
    """Refuse to clean a directory that holds the site sources.

    Args:
        site_root: Site root containing the configuration.
        out: Output directory about to be removed.

    Raises:
        ValueError: If ``out`` is the site root, one of its parents, or holds a site.yml.
    """
    if site_root.resolve().is_relative_to(out.resolve()) or (out / SITE_CONFIG_FILE).exists():
        msg = f"Refusing to clean {out}: it contains the site sources. Choose a separate output directory."
        raise ValueError(msg)


def build_site(
    site_root: Path, output_dir: Path | None = None, clean: bool = False, verbose: bool = False
) -> list[Path]:
    """Render every route of the site to static HTML files.

    Args:
        site_root: Site root containing the configuration.
        output_dir: Output directory (default: ``<site_root>/build``).
        clean: Remove the output directory before writing.
        verbose: Print each written file.

    Returns:
        Paths of the written files.

    Raises:
        FileNotFoundError: If no site configuration exists.
        SiteConfigError: If the site configuration is invalid.
        ValueError: If ``clean`` would remove the site sources.
    """
    site_config = load_site_config(site_root)
    layout = SiteLayout(site_config)
    out = output_dir or (site_root / BUILD_DIR)

    if clean and out.exists():
        _check_clean_target(site_root, out)
        shutil.rmtree(out)

    written: list[Path] = []
    for route, render in ROUTES.items():
        page = render(site_config, layout)
        target = out / output_path_for(route)
        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_text(render_document(page, site_config, route), encoding="utf-8")
        written.append(target)
        if verbose:
            console.print(f"[dim]  {route} -> {target}[/dim]")

    return written


def strip_base_url(path: str, base_url: str) -> str | None:
    """Map a request path under the site base URL to a path in the output directory.

    Args:
        path: Request path, possibly with a query string.
        base_url: Normalized base URL (begins and ends with ``/``).

    Returns:
        The path relative to the output root, or None if it lies outside the base URL.
    """
    if base_url == "/":
        return path
    route, sep, query = path.partition("?")
    if route == base_url.rstrip("/"):
        return "/" + sep + query
    if route.startswith(base_url):
        return "/" + path[len(base_url) :]
    return None


class BaseUrlRequestHandler(SimpleHTTPRequestHandler):
    """Static file handler that serves the output directory under the site base URL."""

    base_url: str

    def __init__(self, *args: Any, base_url: str = "/", **kwargs: Any):
        """Initialize handler.

        Args:
            *args: Positional arguments for SimpleHTTPRequestHandler
            base_url: Normalized site base URL the output directory is mounted at
            **kwargs: Keyword arguments for SimpleHTTPRequestHandler
        """
        self.base_url = base_url
        super().__init__(*args, **kwargs)

    def send_head(self) -> IO[bytes] | None:
        if strip_base_url(self.path, self.base_url) is None:
            self.send_error(HTTPStatus.NOT_FOUND, f"Not under {self.base_url}")
            return None
        return super().send_head()

    def translate_path(self, path: str) -> str:
        return super().translate_path(strip_base_url(path, self.base_url) or path)


def _serve_forever(server: ThreadingHTTPServer) -> int:
    """Run a server until interrupted.

    Args:
        server: Bound HTTP server.

    Returns:
        0 once the server stops.
    """
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    finally:
        server.server_close()
    return 0


def serve_site(site_root: Path, host: str = "127.0.0.1", port: int = 3000, output_dir: Path | None = None) -> int:
    """Build the site and serve it for local preview.

    Pages are served under the configured base URL so their links resolve.

    Args:
        site_root: Site root containing the configuration.
        host: Server host address.
        port: Server port.
        output_dir: Output directory (default: ``<site_root>/build``).

    Returns:
        Exit code, 0 when stopped with Ctrl+C.

    Raises:
        FileNotFoundError: If no site configuration exists.
        SiteConfigError: If the site configuration is invalid.
        OSError: If the address cannot be bound.
    """
    out = output_dir or (site_root / BUILD_DIR)
    _ = build_site(site_root, out)
    base_url = load_site_config(site_root).base_url

    handler = partial(BaseUrlRequestHandler, directory=str(out), base_url=base_url)
    server = ThreadingHTTPServer((host, port), handler)
    console.print(f"[dim]Serving {out} at http://{host}:{port}{base_url}[/dim]")
    return _serve_forever(server)
