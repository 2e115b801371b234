"""
Root router module.
Handles main application endpoints.
"""
from fastapi import APIRouter, Request

router = APIRouter(
    tags=["root"]
)


@router.get("/")
async def root(request: Request):
    """Root endpoint"""
    app_settings = request.app.state.settings
    return {
        "message": f"{app_settings.app_name} is running",
        "version": app_settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }
