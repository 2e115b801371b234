"""
Application factory module.
Creates and configures the FastAPI application.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from .config import Settings, settings as default_settings
from ..middleware.logging import LoggingMiddleware
from ..middleware.cors import CORSMiddleware, CORSPolicy, policy_from_settings
from ..routers import root, health

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    policy: Optional[CORSPolicy] = None
) -> FastAPI:
    """Application factory function"""
    if app_settings is None:
        app_settings = default_settings

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Create FastAPI app
    app = FastAPI(
        title=app_settings.app_name,
        description=app_settings.description,
        version=app_settings.app_version,
        debug=app_settings.debug
    )
    app.state.settings = app_settings

    # Add CORS middleware
    if policy is None:
        policy = policy_from_settings(app_settings)
    app.add_middleware(CORSMiddleware, policy=policy)
    logger.info("CORS enabled for origins %s", sorted(policy.origins))

    # Add custom middleware
    app.add_middleware(LoggingMiddleware)

    # Include routers
    app.include_router(root.router)
    app.include_router(health.router)

    return app
