from fastapi import status
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from ..modules.common.constants import CATALOG_PREFIX
from ..modules.common.utils.error_handler import register_exception_handlers
from .ui import router as catalog_router
from .rendering import TEMPLATES_DIR, templates

settings = get_settings()

app = create_application(
    router=catalog_router,
    settings=settings,
    summary="Library catalog with server-rendered author and genre pages",
)

register_exception_handlers(app, templates)

static_dir = TEMPLATES_DIR.parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


@app.get("/", include_in_schema=False)
async def get_index() -> RedirectResponse:
    """Send visitors to the genre list."""
    return RedirectResponse(url=f"{CATALOG_PREFIX}/genres", status_code=status.HTTP_302_FOUND)


@app.get(
    "/health",
    summary="Health Check",
    description="Simple health check endpoint for monitoring and container orchestration.",
    responses={
        200: {"description": "Catalog is healthy and responding"},
    },
)
async def health_check():
    """Health check endpoint for Docker health checks."""
    return {"status": "healthy", "message": f"{settings.APP_NAME} is running"}
