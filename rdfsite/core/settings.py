from __future__ import annotations
import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from loguru import logger


DEFAULT_SETTINGS: Dict[str, Any] = {
    "title": "RDF on Elixir",
    "description": "Implementation of the Linked Data and Semantic Standards for Elixir",
    # [tag-name, attribute-map] pairs, passed through to the framework untouched
    "head": [
        ["link", {"rel": "manifest", "href": "/icons/manifest.json"}],
        ["link", {"rel": "icon", "type": "image/x-icon", "sizes": "16x16 32x32", "href": "/icons/favicon.ico"}],
        ["link", {"rel": "icon", "sizes": "192x192", "href": "/icons/favicon-192.png"}],
        ["link", {"rel": "apple-touch-icon", "sizes": "180x180", "href": "/icons/favicon-180-precomposed.png"}],
        ["meta", {"name": "msapplication-TileImage", "content": "/icons/favicon-144.png"}],
        ["meta", {"name": "msapplication-TileColor", "content": "#FFFFFF"}],
        ["meta", {"name": "theme-color", "content": "#3eaf7c"}],
        ["meta", {"name": "apple-mobile-web-app-capable", "content": "yes"}],
        ["meta", {"name": "apple-mobile-web-app-status-bar-style", "content": "black"}],
    ],
    "theme": {
        "repo": "marcelotto/rdf-elixir-website",
        "docsDir": "content",
        "editLinks": True,
    },
    # [plugin-name, options] pairs
    "plugins": [
        ["@vuepress/back-to-top", True],
        ["@vuepress/pwa", {"serviceWorker": True, "updatePopup": True}],
    ],
}

# env var -> (section, key); section None means top level
ENV_OVERRIDES = {
    "RDFSITE_TITLE": (None, "title"),
    "RDFSITE_DESCRIPTION": (None, "description"),
    "RDFSITE_REPO": ("theme", "repo"),
    "RDFSITE_DOCS_DIR": ("theme", "docsDir"),
}


class Settings:
    """Non-navigation part of the site config.

    precedence: env overrides > settings file (RDFSITE_SETTINGS_FILE) > DEFAULT_SETTINGS
    """

    def __init__(self, file_path: Optional[str] = None):
        path = file_path or os.getenv("RDFSITE_SETTINGS_FILE")
        self.file_path = Path(path) if path else None

    def load(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.file_path is not None:
            if self.file_path.exists():
                try:
                    with open(self.file_path, "r", encoding="utf-8") as f:
                        data = yaml.safe_load(f) or {}
                except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                    logger.warning(f"failed to load settings from {self.file_path}: {e}")
                    data = {}
                if not isinstance(data, dict):
                    logger.warning(f"ignoring settings file {self.file_path}: top level is not a mapping")
                    data = {}
            else:
                logger.warning(f"settings file {self.file_path} does not exist; using defaults")
        return _apply_env(_deep_merge(DEFAULT_SETTINGS, _check_shapes(data)))

    def save(self, cfg: Dict[str, Any]) -> None:
        if self.file_path is None:
            raise ValueError("no settings file path configured")
        data = _deep_merge(DEFAULT_SETTINGS, cfg or {})
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.file_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)


def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _is_pair_list(val: Any) -> bool:
    return isinstance(val, list) and all(isinstance(p, list) and len(p) == 2 for p in val)


# key -> check for values read from a settings file
_TOP_LEVEL_CHECKS = {
    "title": lambda v: isinstance(v, str),
    "description": lambda v: isinstance(v, str),
    "head": _is_pair_list,
    "plugins": _is_pair_list,
    "theme": lambda v: isinstance(v, dict),
}
_THEME_CHECKS = {
    "repo": lambda v: isinstance(v, str),
    "docsDir": lambda v: v is None or isinstance(v, str),
    "editLinks": lambda v: isinstance(v, bool),
}


def _drop_bad_values(data: Dict[str, Any], checks: Dict[str, Any], where: str) -> Dict[str, Any]:
    out = {}
    for k, v in data.items():
        check = checks.get(k)
        if check is not None and not check(v):
            logger.warning(f"ignoring {where}{k}={v!r}: wrong type; keeping default")
            continue
        out[k] = v
    return out


def _check_shapes(data: Dict[str, Any]) -> Dict[str, Any]:
    out = _drop_bad_values(data, _TOP_LEVEL_CHECKS, "")
    if "theme" in out:
        out["theme"] = _drop_bad_values(out["theme"], _THEME_CHECKS, "theme.")
    return out


def _apply_env(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for var, (section, key) in ENV_OVERRIDES.items():
        val = os.getenv(var)
        if val is None:
            continue
        target = cfg.setdefault(section, {}) if section else cfg
        target[key] = val
    return cfg
