"""Tests for configuration models and YAML helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from docshome.models import NavLink, SiteConfigError, SiteConfiguration
from docshome.yaml_utils import dump_yaml, load_yaml, read_yaml_mapping, write_yaml


class TestSiteConfiguration:
    """Test suite for SiteConfiguration."""

    def test_defaults(self) -> None:
        """Test only the title is required."""
        config = SiteConfiguration(title="Acme")

        assert config.base_url == "/"
        assert config.navbar.items == ()
        assert config.footer.style == "light"

    def test_alias_and_field_name(self) -> None:
        """Test baseUrl and base_url are both accepted."""
        assert SiteConfiguration.from_dict({"title": "x", "baseUrl": "/a"}).base_url == "/a/"
        assert SiteConfiguration.from_dict({"title": "x", "base_url": "a/"}).base_url == "/a/"

    def test_url_trailing_slash_removed(self) -> None:
        """Test the site origin is stored without a trailing slash."""
        assert SiteConfiguration(title="x", url="https://a.test/").url == "https://a.test"

    def test_unknown_keys_ignored(self) -> None:
        """Test extra keys in the source do not fail validation."""
        assert SiteConfiguration.from_dict({"title": "x", "organizationName": "acme"}).title == "x"

    def test_to_dict_round_trips(self) -> None:
        """Test to_dict output loads back to an equal configuration."""
        config = SiteConfiguration.default("Acme")

        data = config.to_dict()

        assert data["baseUrl"] == "/"
        assert data["navbar"]["items"] == [{"label": "Docs", "to": "/docs/intro"}]
        assert SiteConfiguration.from_dict(data) == config

    def test_default_links_docs(self) -> None:
        """Test the default configuration links the docs entry from the navbar."""
        assert SiteConfiguration.default().navbar.items == (NavLink(label="Docs", to="/docs/intro"),)

    def test_site_config_error_is_value_error(self) -> None:
        """Test callers catching ValueError also catch configuration errors."""
        assert issubclass(SiteConfigError, ValueError)


class TestYamlUtils:
    """Test suite for YAML helpers."""

    def test_load_empty_document(self) -> None:
        """Test an empty document loads as an empty mapping."""
        assert load_yaml("") == {}

    def test_load_scalar_is_none(self) -> None:
        """Test a non-mapping document loads as None."""
        assert load_yaml("just text") is None

    def test_read_yaml_mapping_error(self, tmp_path: Path) -> None:
        """Test parse errors surface as SiteConfigError."""
        path = tmp_path / "site.yml"
        path.write_text("a: [b\n", encoding="utf-8")

        with pytest.raises(SiteConfigError, match="Failed to parse site.yml"):
            read_yaml_mapping(path)

    def test_dump_block_style(self) -> None:
        """Test nested data is written in block style with indented dashes."""
        text = dump_yaml({"navbar": {"items": [{"label": "Docs", "to": "/docs/intro"}]}})

        assert text == "navbar:\n  items:\n    - label: Docs\n      to: /docs/intro\n"

    def test_multiline_literal(self) -> None:
        """Test multi-line strings are written as literal blocks."""
        text = dump_yaml({"copyright": "line one\nline two\n"})

        assert text.startswith("copyright: |")

    def test_write_then_read(self, tmp_path: Path) -> None:
        """Test a written file reads back to the same mapping."""
        path = tmp_path / "site.yml"

        write_yaml(path, {"title": "Acme", "footer": {"style": "dark"}})

        assert read_yaml_mapping(path) == {"title": "Acme", "footer": {"style": "dark"}}
