"""Core components for rdfsite.

Modules:
  models: Frozen pydantic models for nav items, groups and sidebar sections.
  config_loader: Parse the YAML/Python site data file into SiteData.
  settings: Non-navigation site settings (title, head tags, theme, plugins).
  builder: SiteMapBuilder and assembly of the full site config object.
  validation: Nav/sidebar consistency checks.
  discovery: Scan a docs directory for the pages each section has.
  emit: JSON / YAML / config.js serialization.
  logging: Logger setup and log summaries.
"""

from .builder import SiteMapBuilder  # noqa: F401
