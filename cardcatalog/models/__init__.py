from cardcatalog.models.catalog import (
    EMPTY,
    CacheSlot,
    CardsDataset,
    CatalogStats,
    Empty,
    Ready,
    Record,
    ReloadResult,
    SetsDataset,
)
from cardcatalog.models.errors import (
    CacheNotReadyError,
    DatasetLoadError,
    DatasetParseError,
    SourceUnavailableError,
)

__all__ = [
    "EMPTY",
    "CacheNotReadyError",
    "CacheSlot",
    "CardsDataset",
    "CatalogStats",
    "DatasetLoadError",
    "DatasetParseError",
    "Empty",
    "Ready",
    "Record",
    "ReloadResult",
    "SetsDataset",
    "SourceUnavailableError",
]
