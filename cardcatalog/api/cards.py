"""
Card API endpoints.

Serves the cached card catalog, in full or filtered by set, with HTTP
caching headers. The full listing honours If-Modified-Since against the
cards source's Last-Modified marker.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Response, status
from fastapi.responses import JSONResponse

from cardcatalog.api.schemas import ErrorResponse
from cardcatalog.config import Settings, get_settings
from cardcatalog.models.errors import CacheNotReadyError
from cardcatalog.services.catalog_query import (
    last_modified,
    list_all_cards,
    list_cards_by_set,
)
from cardcatalog.services.catalog_store import CatalogStore, get_catalog_store

router = APIRouter(prefix="/api/cards", tags=["cards"])

NOT_LOADED_MESSAGE = "Wait for the catalog to finish loading"


def cache_control(settings: Settings) -> str:
    return f"public, max-age={settings.cache_max_age}"


@router.get(
    "",
    response_model=None,
    responses={304: {"description": "Not modified"}, 503: {"model": ErrorResponse}},
)
async def get_cards(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    settings: Annotated[Settings, Depends(get_settings)],
    if_modified_since: Annotated[str | None, Header()] = None,
) -> Response:
    """
    Full card listing.

    Returns 304 with no body when If-Modified-Since matches the current
    Last-Modified value exactly.
    """
    try:
        cards = list_all_cards(store)
    except CacheNotReadyError as e:
        raise CacheNotReadyError(e.dataset, NOT_LOADED_MESSAGE) from e
    marker = last_modified(store)

    headers = {
        "Cache-Control": cache_control(settings),
        "Last-Modified": marker,
        "X-Total-Cards": str(len(cards)),
    }

    if if_modified_since is not None and if_modified_since == marker:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers=headers)

    return JSONResponse(content=list(cards), headers=headers)


@router.get(
    "/set/{set_id}",
    response_model=None,
    responses={503: {"model": ErrorResponse}},
)
async def get_cards_by_set(
    set_id: str,
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """
    Cards belonging to one set.

    An unknown set id yields an empty list, not an error.
    """
    cards = list_cards_by_set(store, set_id)

    headers = {
        "Cache-Control": cache_control(settings),
        "X-Total-Cards": str(len(cards)),
    }
    return JSONResponse(content=cards, headers=headers)
