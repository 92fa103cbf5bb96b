"""
Course catalog accessor.

Loads a JSON list of course records once and answers lookups, searches
and per-year queries against the in-memory copy. Also derives display
attributes (colors, emoji, radar chart points) for single courses.
"""

from coursecatalog.accessor import CatalogAccessor, default_catalog_path

__all__ = ["CatalogAccessor", "default_catalog_path"]
