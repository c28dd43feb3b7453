"""Site scaffolding for docshome."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment
from rich.console import Console
from rich.panel import Panel

from docshome.config import SITE_CONFIG_FILE
from docshome.models import MessageType, SiteConfiguration
from docshome.templates import INTRO_MD_TEMPLATE
from docshome.yaml_utils import write_yaml

# Initialize Rich console
console = Console()


def display_message(message: str, message_type: MessageType = MessageType.INFO, title: str | None = None) -> None:
    """Display a formatted message panel.

    Args:
        message: The message text to display, as Rich markup
        message_type: Type of message (affects styling)
        title: Optional panel title (defaults to message type)
    """
    color, default_title = message_type.value
    panel_title = title or default_title

    console.print(
        Panel(message, title=f"[bold {color}]{panel_title}[/bold {color}]", border_style=color, padding=(1, 2))
    )


def create_site_config(site_root: Path, title: str) -> bool:
    """Create site.yml with default settings.

    Only creates if it doesn't exist - preserves user customizations.

    Args:
        site_root: Site root directory.
        title: Site title.

    Returns:
        True if the file was written.
    """
    config_path = site_root / SITE_CONFIG_FILE
    if config_path.exists():
        console.print(f"[yellow]  Preserving existing {config_path.name}[/yellow]")
        return False

    write_yaml(config_path, SiteConfiguration.default(title).to_dict())
    console.print(f"[green]  Created {config_path.name}[/green]")
    return True


def create_intro_page(site_root: Path, title: str) -> bool:
    """Create docs/intro.md, the page the landing page links to.

    Only creates if it doesn't exist - preserves user customizations.

    Args:
        site_root: Site root directory.
        title: Site title used in the page text.

    Returns:
        True if the file was written.
    """
    docs_dir = site_root / "docs"
    docs_dir.mkdir(exist_ok=True)

    intro_path = docs_dir / "intro.md"
    if intro_path.exists():
        console.print(f"[yellow]  Preserving existing docs/{intro_path.name}[/yellow]")
        return False

    env = Environment(keep_trailing_newline=True, autoescape=False)
    template = env.from_string(INTRO_MD_TEMPLATE)
    _ = intro_path.write_text(template.render(site_title=title), encoding="utf-8")
    console.print(f"[green]  Created docs/{intro_path.name}[/green]")
    return True


def init_site(site_root: Path, title: str | None = None) -> list[Path]:
    """Scaffold a site root.

    Args:
        site_root: Site root directory, created if missing.
        title: Site title (default: the directory name).

    Returns:
        Paths of the files that were created.
    """
    site_root.mkdir(parents=True, exist_ok=True)
    site_title = title if title is not None else site_root.name

    created: list[Path] = []
    if create_site_config(site_root, site_title):
        created.append(site_root / SITE_CONFIG_FILE)
    if create_intro_page(site_root, site_title):
        created.append(site_root / "docs" / "intro.md")
    return created
