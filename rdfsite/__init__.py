"""
RDF on Elixir site configuration

This package builds the navigation bar and per-section sidebars of the
"RDF on Elixir" documentation site from one literal data file, and emits the
config object the static site framework reads.
"""

from .core.builder import (
    SiteMapBuilder,
    build_nav,
    build_sidebar,
    build_site_config,
)
from .core.config_loader import load_site_data
from .core.models import NavGroup, NavItem, SidebarSection, SiteData

__all__ = [
    "SiteMapBuilder",
    "build_nav",
    "build_sidebar",
    "build_site_config",
    "load_site_data",
    "NavItem",
    "NavGroup",
    "SidebarSection",
    "SiteData",
]
