"""
CardCatalog services.

Dataset loading, the in-memory catalog store and read queries over it.
"""

from cardcatalog.services.catalog_query import (
    cards_loaded,
    compute_stats,
    last_modified,
    list_all_cards,
    list_cards_by_set,
    list_sets,
    set_id_of,
    sets_loaded,
)
from cardcatalog.services.catalog_store import (
    CatalogStore,
    catalog_store,
    get_catalog_store,
)
from cardcatalog.services.dataset_loader import (
    http_date,
    load_cards,
    load_sets,
    read_records,
    reload_catalog,
)

__all__ = [
    # Store
    "CatalogStore",
    "catalog_store",
    "get_catalog_store",
    # Loader
    "http_date",
    "load_cards",
    "load_sets",
    "read_records",
    "reload_catalog",
    # Queries
    "cards_loaded",
    "compute_stats",
    "last_modified",
    "list_all_cards",
    "list_cards_by_set",
    "list_sets",
    "set_id_of",
    "sets_loaded",
]
