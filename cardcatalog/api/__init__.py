from cardcatalog.api.cards import router as cards_router
from cardcatalog.api.catalog import router as catalog_router
from cardcatalog.api.health import router as health_router
from cardcatalog.api.sets import router as sets_router

__all__ = [
    "cards_router",
    "catalog_router",
    "health_router",
    "sets_router",
]
