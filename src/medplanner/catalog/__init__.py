"""
medplanner - Recipe Catalog Package.

- RecipeCatalog: immutable, queryable recipe collection
- load_catalog: read a catalog from JSON or YAML
- default_catalog: bundled starter catalog
"""

from medplanner.catalog.catalog import RecipeCatalog, default_catalog, load_catalog

__all__ = [
    "RecipeCatalog",
    "default_catalog",
    "load_catalog",
]
