"""
Set API endpoints.

Serves the cached set catalog, including any embedded set images.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from cardcatalog.api.cards import cache_control
from cardcatalog.api.schemas import ErrorResponse
from cardcatalog.config import Settings, get_settings
from cardcatalog.services.catalog_query import list_sets
from cardcatalog.services.catalog_store import CatalogStore, get_catalog_store

router = APIRouter(prefix="/api/sets", tags=["sets"])


@router.get("", response_model=None, responses={503: {"model": ErrorResponse}})
async def get_sets(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """Full set listing."""
    sets = list_sets(store)

    headers = {
        "Cache-Control": cache_control(settings),
        "X-Total-Sets": str(len(sets)),
    }
    return JSONResponse(content=list(sets), headers=headers)
