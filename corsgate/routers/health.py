"""
Health check router module.
Handles HTTP routing for the health endpoint.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "Service is healthy"}
    }
)


@router.get("")
async def health_check(request: Request):
    """Basic health check endpoint for load balancers and monitoring"""
    app_settings = request.app.state.settings
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
            "service": app_settings.app_name,
            "version": app_settings.app_version
        }
    )
