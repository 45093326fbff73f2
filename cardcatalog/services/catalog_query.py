"""
Catalog queries.

Read-only views over the catalog store. Every listing raises
CacheNotReadyError while the slot it reads is empty, so "not loaded" is
never confused with "loaded but no records".
"""

from collections.abc import Sequence
from typing import Any

from cardcatalog.models.catalog import CardsDataset, CatalogStats, Ready, Record, SetsDataset
from cardcatalog.models.errors import CacheNotReadyError
from cardcatalog.services.catalog_store import CatalogStore

SET_ID_SEPARATOR = "-"


def set_id_of(card: Record) -> str | None:
    """
    Derive the set id from a card's id.

    Args:
        card: Card record

    Returns:
        The part of the id before the first separator (the whole id if it
        has none). None if the card has no usable id.
    """
    card_id: Any = card.get("id")
    if not isinstance(card_id, str) or not card_id:
        return None
    return card_id.split(SET_ID_SEPARATOR, 1)[0]


def _cards_dataset(store: CatalogStore) -> CardsDataset:
    slot = store.cards
    if not isinstance(slot, Ready):
        raise CacheNotReadyError("cards")
    return slot.dataset


def _sets_dataset(store: CatalogStore) -> SetsDataset:
    slot = store.sets
    if not isinstance(slot, Ready):
        raise CacheNotReadyError("sets")
    return slot.dataset


def list_all_cards(store: CatalogStore) -> Sequence[Record]:
    """Return every cached card in source order. Callers must not mutate records."""
    return _cards_dataset(store).cards


def last_modified(store: CatalogStore) -> str:
    """Freshness marker of the cached cards."""
    return _cards_dataset(store).last_modified


def list_cards_by_set(store: CatalogStore, set_id: str) -> list[Record]:
    """Return cards belonging to set_id, preserving source order."""
    return [card for card in _cards_dataset(store).cards if set_id_of(card) == set_id]


def list_sets(store: CatalogStore) -> Sequence[Record]:
    return _sets_dataset(store).sets


def compute_stats(store: CatalogStore) -> CatalogStats:
    """
    Aggregate catalog statistics.

    total_sets counts distinct set ids derived from card ids; cards without
    an id contribute none.
    """
    dataset = _cards_dataset(store)
    set_ids = {set_id_of(card) for card in dataset.cards}
    set_ids.discard(None)
    return CatalogStats(
        total_cards=len(dataset.cards),
        total_sets=len(set_ids),
        last_updated=dataset.last_modified,
    )


def cards_loaded(store: CatalogStore) -> int:
    """Number of cached cards, 0 when nothing is loaded."""
    slot = store.cards
    return len(slot.dataset.cards) if isinstance(slot, Ready) else 0


def sets_loaded(store: CatalogStore) -> int:
    """Number of cached sets, 0 when nothing is loaded."""
    slot = store.sets
    return len(slot.dataset.sets) if isinstance(slot, Ready) else 0
