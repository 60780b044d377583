"""Lightweight logging setup for rdfsite.

All rdfsite.* loggers share the handlers of the `rdfsite` logger. Users can
override log level with RDFSITE_LOG_LEVEL env var and add a log
file with RDFSITE_LOG_DIR.

Also includes a helper to summarize nav/sidebar structures for debug logging
without dumping whole payloads.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

LOG_FILE_NAME = "rdfsite.log"


def summarize_for_log(obj: Any, *, max_items: int = 8) -> Any:
    """Return a compact, JSON-serializable summary suitable for logging.

    - pydantic models: type name plus the first fields
    - Dict: size and keys (truncated)
    - List/Tuple: length and a preview of item types
    - str: length and truncated preview
    """
    if obj is None or isinstance(obj, (bool, int, float)):
        return obj
    if isinstance(obj, str):
        return {"type": "str", "len": len(obj), "preview": (obj if len(obj) <= 80 else obj[:77] + "...")}
    if isinstance(obj, BaseModel):
        fields = list(type(obj).model_fields)[:max_items]
        return {"type": type(obj).__name__, "fields": fields}
    if isinstance(obj, dict):
        out: Dict[str, Any] = {"type": "dict", "len": len(obj)}
        out["keys"] = [str(k) for k in list(obj.keys())[:max_items]]
        return out
    if isinstance(obj, (list, tuple)):
        return {
            "type": type(obj).__name__,
            "len": len(obj),
            "preview_types": [type(x).__name__ for x in list(obj)[:max_items]],
        }
    return {"type": type(obj).__name__}


ROOT_LOGGER = "rdfsite"
_FMT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def configure_logging(log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Set up the shared `rdfsite` logger; every `rdfsite.*` logger propagates to it.

    Safe to call repeatedly: the stream handler is added once and a file
    handler once per log directory. `log_dir` falls back to RDFSITE_LOG_DIR.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(_FMT))
        root.addHandler(stream_handler)
    log_dir = log_dir or os.getenv("RDFSITE_LOG_DIR")
    if log_dir:
        p = Path(log_dir)
        p.mkdir(parents=True, exist_ok=True)
        if not _has_file_handler(root, p / LOG_FILE_NAME):
            fh = logging.FileHandler(p / LOG_FILE_NAME, encoding="utf-8")
            fh.setFormatter(logging.Formatter(_FMT))
            root.addHandler(fh)
    root.setLevel(os.getenv("RDFSITE_LOG_LEVEL", "INFO").upper())
    root.propagate = False
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "summarize_for_log", "LOG_FILE_NAME"]
