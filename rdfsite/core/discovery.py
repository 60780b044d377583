"""Scan a docs directory for the pages each section actually has.

Rules:
- First-level directories are sections; their root path is '/<name>/'
- README.md (or index.md) is the section index and becomes the '' slug, listed first
- Other *.md files follow, sorted, as their stem
- Hidden directories (e.g. .vuepress) are skipped
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .errors import DiscoveryError
from .models import SiteData

INDEX_NAMES = ("README.md", "index.md")


def discover_pages(docs_dir: Path) -> Dict[str, List[str]]:
    if not docs_dir.is_dir():
        raise DiscoveryError(f"Docs directory {docs_dir} does not exist")
    sections: Dict[str, List[str]] = {}
    for sub in sorted(p for p in docs_dir.iterdir() if p.is_dir() and not p.name.startswith(".")):
        slugs = []
        if any((sub / name).exists() for name in INDEX_NAMES):
            slugs.append("")
        for md in sorted(sub.glob("*.md")):
            if md.name in INDEX_NAMES:
                continue
            slugs.append(md.stem)
        if slugs:
            sections[f"/{sub.name}/"] = slugs
    return sections


def compare_with_docs(data: SiteData, docs_dir: Path) -> List[str]:
    """List sidebar slugs without a page file and page files missing from the sidebar."""
    found = discover_pages(docs_dir)
    problems = []
    for project in data.projects:
        on_disk = found.get(project.root)
        if on_disk is None:
            problems.append(f"section {project.root!r} has no directory in {docs_dir}")
            continue
        for slug in project.pages:
            if slug not in on_disk:
                problems.append(f"page {project.root}{slug or 'README.md'} is listed but missing")
        for slug in on_disk:
            if slug not in project.pages:
                problems.append(f"page {project.root}{slug or 'README.md'} exists but is not in the sidebar")
    return problems


__all__ = ["discover_pages", "compare_with_docs", "INDEX_NAMES"]
