"""Construction of the nav list, the sidebar map and the full site config.

Construction is pure: the same SiteData always yields equal structures, and
nothing here performs I/O beyond loading the data file when none is given.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .config_loader import load_site_data
from .logging import get_logger, summarize_for_log
from .models import NavEntry, NavGroup, NavItem, Project, SidebarMap, SidebarSection, SiteData
from .settings import Settings

logger = get_logger("rdfsite.builder")


def nav_item(text: str, link: str) -> NavItem:
    return NavItem(text=text, link=link)


class SiteMapBuilder:
    """Builds the `nav` list and `sidebar` map consumed by the site framework."""

    def __init__(self, data: Optional[SiteData] = None):
        self.data = data if data is not None else load_site_data()

    def build_nav(self) -> List[NavEntry]:
        """One entry per project, then the API group, then extra items."""
        nav: List[NavEntry] = [nav_item(p.name, p.root) for p in self.data.projects]
        if self.data.api_docs:
            nav.append(NavGroup(text=self.data.api_group, items=self.data.api_docs))
        nav.extend(self.data.extra_nav)
        logger.debug("built nav: %s", summarize_for_log(nav))
        return nav

    @staticmethod
    def section_for(project: Project) -> SidebarSection:
        return SidebarSection(
            title=project.sidebar_title,
            collapsable=project.collapsable,
            children=project.pages,
        )

    def build_sidebar(self) -> SidebarMap:
        sidebar: SidebarMap = {p.root: [self.section_for(p)] for p in self.data.projects}
        logger.debug("built sidebar: %s", summarize_for_log(sidebar))
        return sidebar


def build_nav(data: Optional[SiteData] = None) -> List[NavEntry]:
    return SiteMapBuilder(data).build_nav()


def build_sidebar(data: Optional[SiteData] = None) -> SidebarMap:
    return SiteMapBuilder(data).build_sidebar()


def dump_nav(nav: List[NavEntry]) -> List[Dict[str, Any]]:
    return [entry.model_dump(mode="json") for entry in nav]


def dump_sidebar(sidebar: SidebarMap) -> Dict[str, List[Dict[str, Any]]]:
    return {root: [s.model_dump(mode="json") for s in sections] for root, sections in sidebar.items()}


def build_site_config(data: Optional[SiteData] = None, settings: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Assemble the plain-dict config object the site framework reads.

    `head` is omitted when empty and `docsDir` when unset.
    """
    builder = SiteMapBuilder(data)
    cfg = settings if settings is not None else Settings().load()
    theme = cfg.get("theme") or {}

    theme_config: Dict[str, Any] = {"repo": theme.get("repo", "")}
    if theme.get("docsDir"):
        theme_config["docsDir"] = theme["docsDir"]
    theme_config["editLinks"] = theme.get("editLinks", False)
    theme_config["nav"] = dump_nav(builder.build_nav())
    theme_config["sidebar"] = dump_sidebar(builder.build_sidebar())

    out: Dict[str, Any] = {
        "title": cfg.get("title", ""),
        "description": cfg.get("description", ""),
    }
    head = cfg.get("head") or []
    if head:
        out["head"] = [list(pair) for pair in head]
    out["themeConfig"] = theme_config
    out["plugins"] = [list(pair) for pair in (cfg.get("plugins") or [])]
    return out


__all__ = [
    "SiteMapBuilder",
    "nav_item",
    "build_nav",
    "build_sidebar",
    "build_site_config",
    "dump_nav",
    "dump_sidebar",
]
