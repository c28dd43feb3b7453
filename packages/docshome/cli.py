"""docshome - Static landing page builder for documentation sites.

This module wires the Typer command-line interface: scaffolding a site root,
rendering the landing page, building the static output and serving it.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from docshome.builder import build_site, serve_site
from docshome.config import SiteConfigProvider
from docshome.generator import display_message, init_site
from docshome.layout import SiteLayout
from docshome.models import MessageType, SiteConfigError
from docshome.pages import ROUTES
from docshome.renderer import render_document
from docshome.validators import display_validation_results, validate_site

# Initialize Rich console
console = Console()

PACKAGE_NAME = "docshome"

# Initialize Typer app
app = typer.Typer(
    name=PACKAGE_NAME,
    help="Static landing page builder for documentation sites",
    add_completion=False,
    rich_markup_mode="rich",
)


def handle_error(error: Exception, user_message: str | None = None) -> NoReturn:
    """Handle and display errors in a user-friendly way.

    Args:
        error: The exception that occurred
        user_message: Optional user-friendly explanation

    Raises:
        typer.Exit: Always, with exit code 1
    """
    error_msg = escape(user_message or str(error))
    display_message(error_msg, MessageType.ERROR)
    raise typer.Exit(1)


def _is_verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def _run_validation(site_root: Path, title: str) -> None:
    console.print()
    all_passed, results = validate_site(site_root)
    display_validation_results(results, title=title)
    console.print()

    if not all_passed:
        display_message(
            "Validation failed - please fix the issues above before continuing.",
            MessageType.ERROR,
            title="Validation Failed",
        )
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    version_str = metadata.version(PACKAGE_NAME)
    display_message(
        f"[bold cyan]docshome[/bold cyan] version [bold green]{version_str}[/bold green]",
        MessageType.INFO,
        title="Version Information",
    )


@app.command()
def info() -> None:
    """Display package information and installation details."""
    pkg_metadata = metadata.metadata(PACKAGE_NAME)
    requires_python = pkg_metadata.get("Requires-Python") or "N/A"

    info_text = f"""
[bold cyan]Package:[/bold cyan] {pkg_metadata["Name"]}
[bold cyan]Version:[/bold cyan] {pkg_metadata["Version"]}
[bold cyan]Summary:[/bold cyan] {pkg_metadata["Summary"]}
[bold cyan]License:[/bold cyan] Unlicense
[bold cyan]Python:[/bold cyan] {requires_python}
"""
    display_message(info_text.strip(), MessageType.INFO, title="Package Information")


@app.command()
def init(
    site_root: Annotated[Path, typer.Argument(help="Directory to scaffold the site in", resolve_path=True)],
    title: Annotated[
        str | None,
        typer.Option("--title", help="Site title (default: directory name)", rich_help_panel="Configuration"),
    ] = None,
) -> None:
    """Create site.yml and docs/intro.md, preserving existing files.

    Args:
        site_root: Site root directory
        title: Site title
    """
    try:
        display_message(
            f"Scaffolding site in [bold cyan]{site_root}[/bold cyan]...", MessageType.INFO, title="Starting Init"
        )
        created = init_site(site_root, title)
    except OSError as e:
        handle_error(e, f"Site scaffolding failed: {e}")
    else:
        next_steps_msg = (
            f"Created {len(created)} file(s) in [bold cyan]{site_root.name}[/bold cyan]\n\n"
            f"Next steps:\n"
            f"  1. Preview locally: [bold]docshome serve {site_root}[/bold]\n"
            f"  2. Build: [bold]docshome build {site_root}[/bold]"
        )
        display_message(next_steps_msg, MessageType.SUCCESS, title="Init Complete")


@app.command()
def render(
    site_root: Annotated[Path, typer.Argument(help="Site root containing site.yml", resolve_path=True)],
    route: Annotated[str, typer.Option("--route", help="Route to render")] = "/",
) -> None:
    """Print the HTML document for one route to stdout.

    Args:
        site_root: Site root directory
        route: Route to render
    """
    page_renderer = ROUTES.get(route)
    if page_renderer is None:
        handle_error(KeyError(route), f"Unknown route '{route}'. Known routes: {', '.join(sorted(ROUTES))}")

    try:
        site_config = SiteConfigProvider(site_root).get_site_config()
    except (FileNotFoundError, SiteConfigError) as e:
        handle_error(e, str(e))

    page = page_renderer(site_config, SiteLayout(site_config))
    typer.echo(render_document(page, site_config, route), nl=False)


@app.command()
def build(
    ctx: typer.Context,
    site_root: Annotated[Path, typer.Argument(help="Site root containing site.yml", resolve_path=True)],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Custom output directory (default: build/)", rich_help_panel="Build Options"),
    ] = None,
    clean: Annotated[
        bool, typer.Option("--clean", help="Remove the output directory first", rich_help_panel="Build Options")
    ] = False,
) -> None:
    """Build the static site.

    Args:
        ctx: Typer context
        site_root: Site root directory
        output_dir: Custom output directory
        clean: Remove the output directory first
    """
    try:
        _run_validation(site_root, "Pre-Build Validation")

        display_message(
            f"Building site for [bold cyan]{site_root}[/bold cyan]...", MessageType.INFO, title="Building Site"
        )
        written = build_site(site_root, output_dir=output_dir, clean=clean, verbose=_is_verbose(ctx))

        output_path = output_dir or (site_root / "build")
        display_message(
            f"Wrote {len(written)} page(s) to [bold cyan]{output_path}[/bold cyan]",
            MessageType.SUCCESS,
            title="Build Complete",
        )
    except typer.Exit:
        # Message already displayed before raising Exit
        raise
    except (FileNotFoundError, SiteConfigError) as e:
        handle_error(e, str(e))
    except ValueError as e:
        handle_error(e, f"Build refused: {e}")
    except OSError as e:
        handle_error(e, f"Build failed: {e}")


@app.command()
def serve(
    site_root: Annotated[Path, typer.Argument(help="Site root containing site.yml", resolve_path=True)],
    host: Annotated[
        str, typer.Option("--host", help="Server host address", rich_help_panel="Server Options")
    ] = "127.0.0.1",
    port: Annotated[
        int, typer.Option("--port", help="Server port", min=1, max=65535, rich_help_panel="Server Options")
    ] = 3000,
) -> None:
    """Build the site and serve it with a local preview server.

    Args:
        site_root: Site root directory
        host: Server host address
        port: Server port
    """
    try:
        _run_validation(site_root, "Pre-Serve Validation")

        display_message(
            f"Starting preview server for [bold cyan]{site_root}[/bold cyan]...\n"
            + "Press Ctrl+C to stop",
            MessageType.INFO,
            title="Preview Server",
        )

        exit_code = serve_site(site_root, host=host, port=port)

        if exit_code == 0:
            display_message("Server stopped", MessageType.INFO, title="Server Stopped")
        else:
            display_message(f"Server failed with exit code {exit_code}", MessageType.ERROR, title="Server Failed")
            raise typer.Exit(exit_code)
    except typer.Exit:
        raise
    except (FileNotFoundError, SiteConfigError) as e:
        handle_error(e, str(e))
    except OSError as e:
        handle_error(e, f"Server failed: {e}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context, verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False
) -> None:
    """docshome - Static landing page builder for documentation sites."""
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)

    ctx.obj = {"verbose": verbose}


if __name__ == "__main__":
    app()
