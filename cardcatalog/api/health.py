"""
Health check endpoints.

Provides liveness and readiness probes based on catalog load state.
"""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from cardcatalog.api.schemas import CamelModel
from cardcatalog.models.catalog import Ready
from cardcatalog.services.catalog_query import cards_loaded, sets_loaded
from cardcatalog.services.catalog_store import CatalogStore, get_catalog_store

router = APIRouter(tags=["health"])


class HealthResponse(CamelModel):
    """Liveness response."""

    status: str
    cards_loaded: int
    timestamp: str


class ReadyResponse(CamelModel):
    """Readiness response."""

    status: str
    cards_loaded: int
    sets_loaded: int


def _iso_now() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> HealthResponse:
    """
    Liveness probe.

    Returns ok while the service is running, whether or not data is loaded.
    """
    return HealthResponse(status="ok", cards_loaded=cards_loaded(store), timestamp=_iso_now())


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse}},
)
async def ready(
    response: Response,
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> ReadyResponse:
    """
    Readiness probe.

    Returns 503 until both cards and sets have been loaded at least once.
    """
    cards = cards_loaded(store)
    sets = sets_loaded(store)
    if isinstance(store.cards, Ready) and isinstance(store.sets, Ready):
        return ReadyResponse(status="ready", cards_loaded=cards, sets_loaded=sets)

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadyResponse(status="not ready", cards_loaded=cards, sets_loaded=sets)
