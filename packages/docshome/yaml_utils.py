"""YAML utilities for docshome.

All ``site.yml`` reading and writing goes through this module so the
loader settings and output formatting stay consistent.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.scalarstring import LiteralScalarString

from docshome.models import SiteConfigError

# Re-export YAMLError for consumers that need to catch it
__all__ = ["YAMLError", "dump_yaml", "load_yaml", "read_yaml_mapping", "write_yaml"]


def load_yaml(content: str) -> dict[str, object] | None:
    """Load YAML content for read-only access.

    Args:
        content: YAML content as string

    Returns:
        Parsed dictionary, ``{}`` for an empty document, or None if the
        document is not a mapping

    Raises:
        YAMLError: If the content is not valid YAML
    """
    yaml = YAML(typ="safe")
    data = yaml.load(content)
    if data is None:
        return {}
    if isinstance(data, dict):
        return cast(dict[str, object], data)
    return None


def read_yaml_mapping(path: Path) -> dict[str, object]:
    """Read a YAML file that must contain a mapping.

    Args:
        path: Path to YAML file

    Returns:
        Parsed dictionary

    Raises:
        SiteConfigError: If the file is not UTF-8 YAML or not a mapping
    """
    try:
        data = load_yaml(path.read_text(encoding="utf-8"))
    except (YAMLError, UnicodeDecodeError) as e:
        msg = f"Failed to parse {path.name}: {e}"
        raise SiteConfigError(msg) from e
    if data is None:
        msg = f"{path.name} must contain a mapping at the top level"
        raise SiteConfigError(msg)
    return data


def _preserve_scalar_style(value: object) -> object:
    r"""Convert multi-line strings to block scalars.

    Strings containing newlines render as ``|`` blocks instead of quoted
    strings with \\n escapes. Nested mappings and lists are converted too.

    Args:
        value: Any value to potentially convert

    Returns:
        The value, possibly wrapped in a ruamel.yaml scalar type
    """
    if isinstance(value, str) and "\n" in value:
        return LiteralScalarString(value)
    if isinstance(value, dict):
        return {key: _preserve_scalar_style(item) for key, item in cast(dict[str, object], value).items()}
    if isinstance(value, list):
        return [_preserve_scalar_style(item) for item in cast(list[object], value)]
    return value


def dump_yaml(data: dict[str, object]) -> str:
    """Serialize a mapping as block-style YAML.

    Args:
        data: Mapping to serialize

    Returns:
        YAML text using two-space indentation with indented sequence dashes
    """
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.indent(mapping=2, sequence=4, offset=2)  # pyright: ignore[reportAttributeAccessIssue]
    stream = StringIO()
    yaml.dump(_preserve_scalar_style(data), stream)
    return stream.getvalue()


def write_yaml(path: Path, data: dict[str, object]) -> None:
    """Write a mapping to a YAML file.

    Args:
        path: Destination path
        data: Mapping to serialize
    """
    _ = path.write_text(dump_yaml(data), encoding="utf-8")
