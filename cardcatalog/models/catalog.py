"""
Catalog datasets and cache slot states.

Datasets are frozen snapshots. A reload builds a new snapshot and swaps it
into the store; nothing is edited in place.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

Record = dict[str, Any]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CardsDataset:
    """
    Cards in source order, stamped with the source's freshness marker.

    Attributes:
        cards: Card records exactly as parsed from the source
        last_modified: HTTP-date of the source file's modification time
    """

    cards: tuple[Record, ...]
    last_modified: str


@dataclass(frozen=True, slots=True)
class SetsDataset:
    """Sets in source order."""

    sets: tuple[Record, ...]


@dataclass(frozen=True, slots=True)
class Empty:
    """Slot that has never been successfully loaded."""


@dataclass(frozen=True, slots=True)
class Ready(Generic[T]):
    """Slot holding a complete dataset."""

    dataset: T


EMPTY = Empty()

CacheSlot = Empty | Ready[T]


@dataclass(frozen=True, slots=True)
class CatalogStats:
    total_cards: int
    total_sets: int
    last_updated: str


@dataclass(frozen=True, slots=True)
class ReloadResult:
    """Outcome of reloading both datasets."""

    cards_loaded: bool
    sets_loaded: bool

    @property
    def succeeded(self) -> bool:
        return self.cards_loaded and self.sets_loaded
