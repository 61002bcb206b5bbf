from sheetcollab.api.http.health import router as health_router
from sheetcollab.api.http.sheets import router as sheets_router
from sheetcollab.api.http.revisions import router as revisions_router

__all__ = [
    "health_router",
    "sheets_router",
    "revisions_router"
]
