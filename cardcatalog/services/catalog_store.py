"""
In-memory catalog store.

Holds the most recently loaded cards and sets datasets. Each slot is
replaced by a single reference assignment, so readers see either the
previous snapshot or the new one.
"""

from cardcatalog.models.catalog import (
    EMPTY,
    CacheSlot,
    CardsDataset,
    Ready,
    SetsDataset,
)


class CatalogStore:
    """Two whole-slot cells: cards and sets. Both start empty."""

    def __init__(self) -> None:
        self._cards: CacheSlot[CardsDataset] = EMPTY
        self._sets: CacheSlot[SetsDataset] = EMPTY

    @property
    def cards(self) -> CacheSlot[CardsDataset]:
        return self._cards

    @property
    def sets(self) -> CacheSlot[SetsDataset]:
        return self._sets

    def replace_cards(self, dataset: CardsDataset) -> None:
        self._cards = Ready(dataset)

    def replace_sets(self, dataset: SetsDataset) -> None:
        self._sets = Ready(dataset)


# Process-wide store populated at startup
catalog_store = CatalogStore()


def get_catalog_store() -> CatalogStore:
    """
    Dependency that provides the catalog store.

    Usage in FastAPI:
        @app.get("/items")
        async def get_items(store: CatalogStore = Depends(get_catalog_store)):
            ...
    """
    return catalog_store
