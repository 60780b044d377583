"""Centralized custom exception hierarchy for site configuration."""
from __future__ import annotations

from typing import List, Optional


class SiteError(Exception):
    """Base class for all site configuration errors."""


class ConfigError(SiteError):
    pass


class ValidationError(SiteError):
    """Loaded site data violates a navigation/sidebar invariant."""

    def __init__(self, problems: List[str], message: Optional[str] = None):
        self.problems = list(problems)
        if message is None:
            message = f"{len(self.problems)} problem(s) in site data: " + "; ".join(self.problems)
        super().__init__(message)


class DiscoveryError(SiteError):  # docs directory missing / unreadable
    pass
