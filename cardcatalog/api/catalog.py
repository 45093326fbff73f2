"""
Catalog API endpoints.

Aggregate statistics and manual reload of both datasets from disk.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from cardcatalog.api.schemas import CamelModel, ErrorResponse
from cardcatalog.config import Settings, get_settings
from cardcatalog.services.catalog_query import cards_loaded, compute_stats, sets_loaded
from cardcatalog.services.catalog_store import CatalogStore, get_catalog_store
from cardcatalog.services.dataset_loader import reload_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])


class StatsResponse(CamelModel):
    """Response model for catalog statistics."""

    total_cards: int
    total_sets: int
    last_updated: str


class ReloadResponse(CamelModel):
    """Response model for a successful reload."""

    message: str
    total_cards: int
    total_sets: int


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses={503: {"model": ErrorResponse}},
)
async def get_stats(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> StatsResponse:
    """
    Catalog statistics.

    totalSets counts distinct set ids derived from card ids.
    """
    stats = compute_stats(store)
    return StatsResponse(
        total_cards=stats.total_cards,
        total_sets=stats.total_sets,
        last_updated=stats.last_updated,
    )


@router.post(
    "/reload",
    response_model=ReloadResponse,
    responses={500: {"model": ErrorResponse}},
)
async def reload(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReloadResponse:
    """
    Re-read both datasets from disk.

    Returns 500 if either load fails. Whatever was cached before a failed
    load keeps being served.
    """
    result = await reload_catalog(store, settings)

    if not result.succeeded:
        logger.warning(
            "Reload incomplete (cards=%s, sets=%s)", result.cards_loaded, result.sets_loaded
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to reload data",
        )

    return ReloadResponse(
        message="Data reloaded successfully",
        total_cards=cards_loaded(store),
        total_sets=sets_loaded(store),
    )
