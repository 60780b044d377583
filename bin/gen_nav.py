#!/usr/bin/env python3
"""Scaffold the `projects` section of site.yaml from a docs folder.

Rules:
- Each first-level directory (rdf-ex, sparql-ex, ...) becomes one project
- Project name defaults to the directory name; edit the labels afterwards
- Pages come from discover_pages: README.md first (as ''), other *.md sorted
- Writes output to stdout so it can be pasted, or to a file if --out provided
"""
from __future__ import annotations
import argparse
import pathlib
import yaml

from rdfsite.core.discovery import discover_pages

ROOT = pathlib.Path(__file__).resolve().parent.parent
CONTENT = ROOT / "content"


def build_projects(docs_dir: pathlib.Path):
    projects = []
    for root, slugs in discover_pages(docs_dir).items():
        projects.append({
            'name': root.strip('/'),
            'root': root,
            'collapsable': False,
            'pages': slugs,
        })
    return {'projects': projects}


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--docs-dir', type=pathlib.Path, default=CONTENT, help='Docs folder to scan')
    ap.add_argument('--out', type=pathlib.Path, help='Write YAML fragment to file')
    args = ap.parse_args()
    if not args.docs_dir.exists():
        raise SystemExit(f"Docs directory {args.docs_dir} does not exist.")
    yaml_fragment = yaml.safe_dump(build_projects(args.docs_dir), sort_keys=False, allow_unicode=True)
    if args.out:
        args.out.write_text(yaml_fragment)
    else:
        print(yaml_fragment)


if __name__ == '__main__':
    main()
