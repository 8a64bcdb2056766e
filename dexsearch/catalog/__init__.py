# ABOUTME: Catalog package for the read-only species dataset.
# ABOUTME: Contains record types, the in-memory Catalog, and the CSV loader.

from dexsearch.catalog.catalog import Catalog, CatalogProvider, Learnset
from dexsearch.catalog.loader import load_catalog
from dexsearch.catalog.models import TYPES, Ability, CatalogEntry, Move

__all__ = [
    "TYPES",
    "Ability",
    "Catalog",
    "CatalogEntry",
    "CatalogProvider",
    "Learnset",
    "Move",
    "load_catalog",
]
