"""Site data loading and normalization.

This module parses the literal site data file (YAML or Python) into a frozen
SiteData model suitable for the builder.

Scope:
- Locate the data file (explicit path > RDFSITE_DATA_FILE > packaged site.yaml).
- Read YAML with safe_load, or run a .py file exposing get_config() / SITE;
  read failures and other suffixes raise ConfigError.
- Validate against the pydantic models.
- Reject duplicate section roots.
"""
from __future__ import annotations

import os
import runpy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pydantic
import yaml

from .errors import ConfigError
from .logging import get_logger
from .models import SiteData

PACKAGED_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "site.yaml"

logger = get_logger("rdfsite.config")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read site data file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Site data in {path} must be a mapping")
    return data


def _read_py(path: Path) -> Dict[str, Any]:
    try:
        ns = runpy.run_path(str(path))
        if "get_config" in ns:
            cfg = ns["get_config"]()
        elif "SITE" in ns:
            cfg = ns["SITE"]
        else:
            raise ConfigError("Python site data must expose get_config() or SITE")
    except ConfigError:
        raise
    except Exception as e:  # noqa: BLE001
        raise ConfigError(f"Failed to run Python site data {path}: {e!r}") from e
    if not isinstance(cfg, dict):
        raise ConfigError("Python site data entry must be a dict")
    return cfg


_READERS = {
    ".yml": _read_yaml,
    ".yaml": _read_yaml,
    ".py": _read_py,
}


def _check_unique_roots(site: SiteData):
    seen = set()
    for project in site.projects:
        if project.root in seen:
            raise ConfigError(f"Duplicate project root: {project.root}")
        seen.add(project.root)


def parse_site_data(raw: Dict[str, Any], source: str = "<dict>") -> SiteData:
    try:
        site = SiteData.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Malformed site data in {source}: {e}") from e
    _check_unique_roots(site)
    return site


def parse_site_file(path: Path) -> SiteData:
    if not path.exists():
        raise ConfigError(f"Site data file not found: {path}")
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigError(f"Unsupported data file type {path.suffix!r}: expected .yaml, .yml or .py")
    raw = reader(path)
    site = parse_site_data(raw, source=str(path))
    logger.debug("loaded %d project(s) from %s", len(site.projects), path)
    return site


def default_data_path() -> Path:
    env_path = os.getenv("RDFSITE_DATA_FILE")
    if env_path:
        return Path(env_path)
    return PACKAGED_DATA_FILE


def load_site_data(path: Optional[Union[str, Path]] = None) -> SiteData:
    return parse_site_file(Path(path) if path else default_data_path())


__all__ = [
    "parse_site_data",
    "parse_site_file",
    "load_site_data",
    "default_data_path",
    "PACKAGED_DATA_FILE",
    "ConfigError",
]
