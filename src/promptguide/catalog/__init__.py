"""Catalog loading.

Reads a component catalog (JSON or YAML) into an immutable Catalog.
"""

from promptguide.catalog.loader import CatalogLoader, load_catalog, load_catalog_from_dict

__all__ = ["CatalogLoader", "load_catalog", "load_catalog_from_dict"]
