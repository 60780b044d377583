"""Navigation and sidebar data model.

All models are frozen; once the site data is loaded nothing mutates it.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class NavItem(BaseModel):
    """Single navigation bar entry."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(description="Label shown in the navigation bar")
    link: str = Field(description="Internal site path ('/...') or absolute external URL")


class NavGroup(BaseModel):
    """Dropdown grouping of navigation entries."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(description="Label of the dropdown")
    items: Tuple[NavItem, ...] = Field(default=(), description="Ordered dropdown entries")


NavEntry = Union[NavItem, NavGroup]


class SidebarSection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    collapsable: bool = False
    children: Tuple[str, ...] = Field(
        default=(),
        description="Ordered page slugs relative to the section root; '' is the index page",
    )


SidebarMap = Dict[str, List[SidebarSection]]


class Project(BaseModel):
    """A documented sub-project: one nav entry plus one sidebar section."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Nav label, e.g. 'RDF.ex'")
    root: str = Field(description="Section root path, e.g. '/rdf-ex/'")
    title: Optional[str] = Field(default=None, description="Sidebar title; defaults to name")
    collapsable: bool = False
    pages: Tuple[str, ...] = ()

    @property
    def sidebar_title(self) -> str:
        return self.title or self.name


class SiteData(BaseModel):
    """Contents of the literal site data file."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    projects: Tuple[Project, ...] = ()
    api_group: str = "API Documentation"
    api_docs: Tuple[NavItem, ...] = ()
    extra_nav: Tuple[NavItem, ...] = ()


__all__ = [
    "NavItem",
    "NavGroup",
    "NavEntry",
    "SidebarSection",
    "SidebarMap",
    "Project",
    "SiteData",
]
