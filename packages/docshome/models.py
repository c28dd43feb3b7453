"""Data models for docshome."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageType(Enum):
    """Message types with associated display styles."""

    ERROR = ("red", "Error")
    SUCCESS = ("green", "Success")
    INFO = ("blue", "Info")
    WARNING = ("yellow", "Warning")


class SiteConfigError(ValueError):
    """Raised when a site configuration source cannot be parsed or validated."""


class NavLink(BaseModel):
    """A labelled link rendered in the navbar or footer."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    label: str
    to: str


class NavbarConfig(BaseModel):
    """Navbar chrome settings."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    title: str | None = None
    items: tuple[NavLink, ...] = ()


class FooterConfig(BaseModel):
    """Footer chrome settings."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    style: Literal["light", "dark"] = "light"
    links: tuple[NavLink, ...] = ()
    copyright: str | None = None


class SiteConfiguration(BaseModel):
    """Read-only site settings shared by every page.

    Loaded once by the configuration provider and never mutated afterwards.
    Keys may be written in snake_case or in the camelCase aliases used by
    hand-written ``site.yml`` files (``baseUrl``).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    tagline: str | None = None
    url: str | None = None
    base_url: str = Field("/", alias="baseUrl")
    favicon: str | None = None
    navbar: NavbarConfig = Field(default_factory=NavbarConfig)
    footer: FooterConfig = Field(default_factory=FooterConfig)

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        stripped = value.strip("/")
        return f"/{stripped}/" if stripped else "/"

    @field_validator("url")
    @classmethod
    def _strip_url_slash(cls, value: str | None) -> str | None:
        return value.rstrip("/") if value else value

    @classmethod
    def default(cls, title: str = "My Site") -> SiteConfiguration:
        """Build the configuration written by ``docshome init``.

        Args:
            title: Site title

        Returns:
            Configuration with a single ``Docs`` navbar entry
        """
        return cls(
            title=title,
            navbar=NavbarConfig(items=(NavLink(label="Docs", to="/docs/intro"),)),
            footer=FooterConfig(style="dark", links=(NavLink(label="Docs", to="/docs/intro"),)),
        )

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> SiteConfiguration:
        """Create SiteConfiguration from a raw YAML or TOML mapping.

        Args:
            data: Raw mapping from the configuration file

        Returns:
            Parsed and validated SiteConfiguration

        Raises:
            pydantic.ValidationError: If required fields are missing or invalid
        """
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain mapping suitable for YAML output.

        Returns:
            Dictionary using the same keys ``from_dict`` accepts
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
