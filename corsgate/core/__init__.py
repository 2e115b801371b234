# Core exports
from .config import Settings, settings
from .app import create_app

__all__ = ["Settings", "settings", "create_app"]
