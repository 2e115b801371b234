# Middleware exports
from .logging import LoggingMiddleware
from .cors import (
    CORSConfigurationError,
    CORSMiddleware,
    CORSOption,
    CORSPolicy,
    allow_credentials,
    allow_headers,
    allow_methods,
    allow_origins,
    build_policy,
    policy_from_settings,
)

__all__ = [
    "LoggingMiddleware",
    "CORSConfigurationError",
    "CORSMiddleware",
    "CORSOption",
    "CORSPolicy",
    "allow_credentials",
    "allow_headers",
    "allow_methods",
    "allow_origins",
    "build_policy",
    "policy_from_settings",
]
