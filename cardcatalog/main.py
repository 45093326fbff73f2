import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cardcatalog.api import cards_router, catalog_router, health_router, sets_router
from cardcatalog.config import settings
from cardcatalog.models.errors import CacheNotReadyError
from cardcatalog.services.catalog_query import cards_loaded, sets_loaded
from cardcatalog.services.catalog_store import catalog_store
from cardcatalog.services.dataset_loader import reload_catalog

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /health",
    "GET /ready",
    "GET /api/cards",
    "GET /api/cards/set/:setId",
    "GET /api/sets",
    "GET /api/stats",
    "POST /api/reload",
]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    result = await reload_catalog(catalog_store, settings)
    if not result.succeeded:
        logger.warning("Starting with an incomplete catalog; POST /api/reload to retry")
    logger.info(
        "Catalog ready: %d cards, %d sets",
        cards_loaded(catalog_store),
        sets_loaded(catalog_store),
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardcatalog"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(cards_router)
app.include_router(sets_router)
app.include_router(catalog_router)


@app.exception_handler(CacheNotReadyError)
async def cache_not_ready_handler(_request: Request, exc: CacheNotReadyError) -> JSONResponse:
    logger.debug("Rejected request: %s", exc)
    content = {"error": "Data not available"}
    if exc.message:
        content["message"] = exc.message
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=content)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods are both "no such route"
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Route not found", "availableEndpoints": AVAILABLE_ENDPOINTS},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


@app.middleware("http")
async def add_security_headers(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def run() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Serving catalog on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
