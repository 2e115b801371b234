"""
CORS Gate: allow-list CORS headers for FastAPI and Starlette applications.
"""
from .middleware.cors import (
    CORSConfigurationError,
    CORSMiddleware,
    CORSPolicy,
    allow_credentials,
    allow_headers,
    allow_methods,
    allow_origins,
    build_policy,
)

__version__ = "0.1.0"

__all__ = [
    "CORSConfigurationError",
    "CORSMiddleware",
    "CORSPolicy",
    "allow_credentials",
    "allow_headers",
    "allow_methods",
    "allow_origins",
    "build_policy",
]
