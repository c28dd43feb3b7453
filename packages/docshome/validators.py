"""Pre-build validation for docshome sites."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.measure import Measurement
from rich.table import Table

from docshome.config import load_site_config
from docshome.layout import SiteLayout
from docshome.models import SiteConfigError, SiteConfiguration
from docshome.pages import ROUTES
from docshome.view import find_all, text_content

# Initialize Rich console for local output
console = Console()

DOCS_ROUTE_PREFIX = "/docs/"
DOCS_SOURCE_SUFFIXES = (".md", ".mdx", "/index.md", "/index.mdx")


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes:
        check_name: Name of the validation check
        passed: Whether the check passed
        message: Status message or error details
        value: Optional value (e.g., the site title)
        required: Whether this check is required for operation
    """

    check_name: str
    passed: bool
    message: str
    value: str | None = None
    required: bool = True


class SiteValidator:
    """Validates a site root before building."""

    site_root: Path
    site_config: SiteConfiguration | None

    def __init__(self, site_root: Path):
        """Initialize validator with the site root.

        Args:
            site_root: Path to the site root directory
        """
        self.site_root = site_root
        self.site_config = None

    def check_path_exists(self) -> ValidationResult:
        """Check if the site root exists and is a directory.

        Returns:
            Validation result
        """
        if not self.site_root.exists():
            return ValidationResult(
                check_name="Path exists", passed=False, message=f"Path does not exist: {self.site_root}"
            )

        if not self.site_root.is_dir():
            return ValidationResult(
                check_name="Path exists", passed=False, message=f"Path is not a directory: {self.site_root}"
            )

        return ValidationResult(check_name="Path exists", passed=True, message="Valid directory")

    def check_site_config(self) -> ValidationResult:
        """Check that the site configuration loads.

        Returns:
            Validation result carrying the site title as its value
        """
        try:
            site_config = load_site_config(self.site_root)
        except FileNotFoundError as e:
            return ValidationResult(
                check_name="Site configuration", passed=False, message=f"{e} - run init command first"
            )
        except SiteConfigError as e:
            return ValidationResult(check_name="Site configuration", passed=False, message=str(e))

        self.site_config = site_config
        return ValidationResult(
            check_name="Site configuration", passed=True, message="Valid configuration", value=site_config.title
        )

    def _docs_source(self, href: str) -> str | None:
        slug = href.split("#", 1)[0].split("?", 1)[0].removeprefix(DOCS_ROUTE_PREFIX).strip("/") or "index"
        for suffix in DOCS_SOURCE_SUFFIXES:
            candidate = f"docs/{slug}{suffix}"
            if (self.site_root / candidate).is_file():
                return candidate
        return None

    def check_docs_links(self, site_config: SiteConfiguration) -> ValidationResult:
        """Check that every docs link on the rendered pages has a source file.

        Each route is rendered with the site layout and its ``/docs/...``
        links are matched against ``docs/<slug>.md``, ``.mdx`` or an
        ``index`` page in a ``docs/<slug>/`` directory.

        Args:
            site_config: Loaded site configuration

        Returns:
            Validation result listing the resolved sources or the missing links
        """
        layout = SiteLayout(site_config)
        labels: dict[str, str] = {}
        for render in ROUTES.values():
            page = render(site_config, layout)
            for anchor in find_all(page.body, "a"):
                href = anchor.attrs.get("href", "")
                if href.startswith(DOCS_ROUTE_PREFIX):
                    labels.setdefault(href, text_content(anchor))

        sources: list[str] = []
        missing: list[str] = []
        for href, label in labels.items():
            source = self._docs_source(href)
            if source is None:
                missing.append(f"{href} ({label})")
            elif source not in sources:
                sources.append(source)

        if missing:
            return ValidationResult(
                check_name="Docs links",
                passed=False,
                message=f"No docs page for {', '.join(missing)} - link will be broken",
                required=False,
            )

        return ValidationResult(
            check_name="Docs links",
            passed=True,
            message=f"{len(labels)} link(s) resolved",
            value=", ".join(sources) or None,
            required=False,
        )


def _get_table_width(table: Table) -> int:
    """Get the natural width of a table using a temporary wide console.

    Args:
        table: The Rich table to measure

    Returns:
        The width in characters needed to display the table
    """
    temp_console = Console(width=9999)
    measurement = Measurement.get(temp_console, temp_console.options, table)
    return int(measurement.maximum)


def display_validation_results(results: list[ValidationResult], title: str = "Site Validation") -> None:
    """Display validation results in a Rich formatted table.

    Args:
        results: List of validation results
        title: Table title
    """
    table = Table(title=f":mag: {title}", box=box.MINIMAL_DOUBLE_HEAD, title_style="bold cyan", show_header=True)

    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Status", justify="center", no_wrap=True)
    table.add_column("Details", style="dim")
    table.add_column("Info", style="magenta")

    for result in results:
        if result.passed:
            status = ":white_check_mark:"
            status_style = "green"
        else:
            status = ":x:" if result.required else ":warning:"
            status_style = "red" if result.required else "yellow"

        details = f"[{status_style}]{escape(result.message)}[/{status_style}]"
        table.add_row(result.check_name, status, details, escape(result.value or ""))

    table.width = _get_table_width(table)
    console.print(table, crop=False, overflow="ignore", no_wrap=True, soft_wrap=True)


def validate_site(site_root: Path) -> tuple[bool, list[ValidationResult]]:
    """Validate a site root.

    Args:
        site_root: Path to the site root directory

    Returns:
        Tuple of (all_required_passed, list of results)
    """
    validator = SiteValidator(site_root)
    path_result = validator.check_path_exists()
    results = [path_result]

    # Only continue with further checks if path exists
    if path_result.passed:
        results.append(validator.check_site_config())
        if validator.site_config is not None:
            results.append(validator.check_docs_links(validator.site_config))

    all_required_passed = all(r.passed or not r.required for r in results)
    return all_required_passed, results
