"""Site configuration loading.

Configuration comes from ``site.yml`` in the site root. Sites without one can
keep their settings in ``pyproject.toml``, either in a ``[tool.docshome]``
table or, failing that, derived from the ``[project]`` name and description.
The ``DOCSHOME_TITLE`` environment variable overrides the loaded title.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import cast

import tomlkit
from pydantic import ValidationError
from tomlkit import exceptions

from docshome.models import SiteConfigError, SiteConfiguration
from docshome.yaml_utils import read_yaml_mapping

SITE_CONFIG_FILE = "site.yml"
PYPROJECT_FILE = "pyproject.toml"
TITLE_ENV_VAR = "DOCSHOME_TITLE"


def _read_pyproject_settings(pyproject_path: Path) -> dict[str, object]:
    """Extract site settings from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Raw settings mapping

    Raises:
        SiteConfigError: If the file is not valid TOML or names no title
    """
    try:
        with open(pyproject_path, encoding="utf-8") as f:
            config = tomlkit.load(f).unwrap()
    except (exceptions.ParseError, UnicodeDecodeError) as e:
        msg = f"Failed to parse {pyproject_path.name}: {e}"
        raise SiteConfigError(msg) from e

    tool = config.get("tool")
    if isinstance(tool, dict):
        section = cast(dict[str, object], tool).get("docshome")
        if isinstance(section, dict):
            return cast(dict[str, object], section)

    project = config.get("project")
    if not isinstance(project, dict):
        msg = f"{pyproject_path.name} has neither [tool.docshome] nor [project] table"
        raise SiteConfigError(msg)
    project_table = cast(dict[str, object], project)
    settings: dict[str, object] = {"title": project_table.get("name")}
    if description := project_table.get("description"):
        settings["tagline"] = description
    return settings


def load_site_config(site_root: Path) -> SiteConfiguration:
    """Load and validate the site configuration.

    Args:
        site_root: Site root directory

    Returns:
        Validated site configuration

    Raises:
        FileNotFoundError: If neither site.yml nor pyproject.toml exists
        SiteConfigError: If the configuration source is invalid
    """
    site_yml = site_root / SITE_CONFIG_FILE
    pyproject = site_root / PYPROJECT_FILE

    if site_yml.exists():
        source = site_yml
        raw = read_yaml_mapping(site_yml)
    elif pyproject.exists():
        source = pyproject
        raw = _read_pyproject_settings(pyproject)
    else:
        msg = f"No {SITE_CONFIG_FILE} or {PYPROJECT_FILE} found in {site_root}"
        raise FileNotFoundError(msg)

    if (title := os.environ.get(TITLE_ENV_VAR)) is not None:
        raw = {**raw, "title": title}

    try:
        return SiteConfiguration.from_dict(raw)
    except ValidationError as e:
        msg = f"Invalid site configuration in {source.name}: {e}"
        raise SiteConfigError(msg) from e


class SiteConfigProvider:
    """Loads the site configuration once and hands out the same instance."""

    site_root: Path

    def __init__(self, site_root: Path):
        """Initialize provider.

        Args:
            site_root: Site root directory
        """
        self.site_root = site_root
        self._config: SiteConfiguration | None = None

    def get_site_config(self) -> SiteConfiguration:
        """Return the site configuration, loading it on first use.

        Returns:
            Site configuration

        Raises:
            FileNotFoundError: If no configuration source exists
            SiteConfigError: If the configuration source is invalid
        """
        if self._config is None:
            self._config = load_site_config(self.site_root)
        return self._config
