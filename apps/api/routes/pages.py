"""Static pages and health check."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter()


@router.get("/admin", include_in_schema=False)
async def admin_page() -> FileResponse:
    """Serve the order administration page."""
    return FileResponse(STATIC_DIR / "admin.html", media_type="text/html")


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}
