"""Consistency checks between the nav list and the sidebar map."""
from __future__ import annotations

from typing import Iterable, List, Set

from .errors import ValidationError
from .logging import get_logger
from .models import NavEntry, NavGroup, NavItem, SidebarMap

logger = get_logger("rdfsite.validation")

LINK_PREFIXES = ("/", "http")


def _iter_items(nav: Iterable[NavEntry]) -> Iterable[NavItem]:
    for entry in nav:
        if isinstance(entry, NavGroup):
            yield from entry.items
        else:
            yield entry


def _check_links(nav: List[NavEntry]) -> List[str]:
    problems = []
    for item in _iter_items(nav):
        if not item.link:
            problems.append(f"nav item {item.text!r} has an empty link")
        elif not item.link.startswith(LINK_PREFIXES):
            problems.append(f"nav item {item.text!r} link {item.link!r} is neither a site path nor a URL")
    return problems


def _check_sidebar_keys(nav: List[NavEntry], sidebar: SidebarMap) -> List[str]:
    links: Set[str] = {item.link for item in _iter_items(nav)}
    return [f"sidebar root {root!r} has no nav entry" for root in sidebar if root not in links]


def _check_sections(sidebar: SidebarMap) -> List[str]:
    problems = []
    for root, sections in sidebar.items():
        if len(sections) != 1:
            problems.append(f"sidebar root {root!r} has {len(sections)} sections, expected 1")
        for section in sections:
            seen: Set[str] = set()
            for slug in section.children:
                if slug in seen:
                    problems.append(f"duplicate slug {slug!r} in section {section.title!r}")
                seen.add(slug)
    return problems


def validate_site(nav: List[NavEntry], sidebar: SidebarMap) -> List[str]:
    """Return every problem found; an empty list means the data is consistent."""
    problems = _check_links(nav) + _check_sidebar_keys(nav, sidebar) + _check_sections(sidebar)
    for p in problems:
        logger.warning(p)
    return problems


def check_site(nav: List[NavEntry], sidebar: SidebarMap) -> None:
    problems = validate_site(nav, sidebar)
    if problems:
        raise ValidationError(problems)


__all__ = ["validate_site", "check_site"]
