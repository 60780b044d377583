"""Serialize the site config as JSON, YAML or a CommonJS config.js module."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

FORMATS = ("json", "yaml", "js")

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".js": "js",
}


def render(config: Dict[str, Any], fmt: str = "json") -> str:
    if fmt == "json":
        return json.dumps(config, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(config, sort_keys=False, allow_unicode=True)
    if fmt == "js":
        return "module.exports = " + json.dumps(config, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unknown output format: {fmt!r} (expected one of {', '.join(FORMATS)})")


def format_for_path(path: Path) -> str:
    try:
        return _SUFFIX_FORMATS[path.suffix.lower()]
    except KeyError:
        raise ValueError(f"Cannot infer output format from {path.name!r}") from None


def write(config: Dict[str, Any], path: Path, fmt: Optional[str] = None) -> Path:
    text = render(config, fmt or format_for_path(path))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


__all__ = ["render", "write", "format_for_path", "FORMATS"]
