"""
Dataset loader.

Reads the cards and sets JSON sources into the catalog store.
"""

import asyncio
import json
import logging
from email.utils import formatdate
from pathlib import Path
from typing import Any

from cardcatalog.config import Settings
from cardcatalog.models.catalog import CardsDataset, Record, ReloadResult, SetsDataset
from cardcatalog.models.errors import (
    DatasetLoadError,
    DatasetParseError,
    SourceUnavailableError,
)
from cardcatalog.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def read_records(path: Path) -> list[Record]:
    """
    Read a JSON array of records from file.

    Args:
        path: Path to the JSON source

    Returns:
        Records in source order.

    Raises:
        SourceUnavailableError: If the file is missing or unreadable
        DatasetParseError: If the file is not a JSON array of objects
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise SourceUnavailableError(path, f"Cannot read {path}: {e.strerror or e}") from e

    try:
        data: Any = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DatasetParseError(path, f"Malformed JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise DatasetParseError(
            path, f"Expected a JSON array in {path}, got {type(data).__name__}"
        )

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise DatasetParseError(
                path, f"Record {index} in {path} is {type(record).__name__}, not an object"
            )

    return data


def http_date(timestamp: float) -> str:
    """Format a POSIX timestamp as an HTTP-date (e.g. 'Mon, 19 Oct 2026 12:00:00 GMT')."""
    return formatdate(timestamp, usegmt=True)


def _read_cards(path: Path) -> CardsDataset:
    cards = read_records(path)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise SourceUnavailableError(path, f"Cannot stat {path}: {e.strerror or e}") from e
    return CardsDataset(cards=tuple(cards), last_modified=http_date(mtime))


def _read_sets(path: Path) -> SetsDataset:
    return SetsDataset(sets=tuple(read_records(path)))


async def load_cards(store: CatalogStore, path: Path) -> bool:
    """
    Load the cards source and swap it into the store.

    Returns:
        True on success. On failure the previous cards stay cached.
    """
    try:
        dataset = await asyncio.to_thread(_read_cards, path)
    except DatasetLoadError as e:
        logger.error("Failed to load cards: %s", e.message)
        return False

    store.replace_cards(dataset)
    logger.info("Loaded %d cards from %s", len(dataset.cards), path)
    return True


async def load_sets(store: CatalogStore, path: Path) -> bool:
    """
    Load the sets source and swap it into the store.

    Returns:
        True on success. On failure the previous sets stay cached.
    """
    try:
        dataset = await asyncio.to_thread(_read_sets, path)
    except DatasetLoadError as e:
        logger.error("Failed to load sets: %s", e.message)
        return False

    store.replace_sets(dataset)
    logger.info("Loaded %d sets from %s", len(dataset.sets), path)
    return True


async def reload_catalog(store: CatalogStore, settings: Settings) -> ReloadResult:
    """Load cards then sets. Both loads always run."""
    cards_loaded = await load_cards(store, settings.cards_path)
    sets_loaded = await load_sets(store, settings.sets_path)
    return ReloadResult(cards_loaded=cards_loaded, sets_loaded=sets_loaded)
