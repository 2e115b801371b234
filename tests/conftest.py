"""
Test configuration and fixtures.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import Headers

from corsgate.core import Settings, create_app
from corsgate.middleware.cors import (
    allow_credentials,
    allow_methods,
    allow_origins,
    build_policy,
)


@pytest.fixture
def make_request():
    """Factory for minimal request objects with a request-line method and headers"""
    def factory(method: str = "GET", headers=None):
        return SimpleNamespace(method=method, headers=Headers(headers=headers or {}))
    return factory


@pytest.fixture
def policy():
    """Policy used by the end-to-end scenarios"""
    return build_policy(
        allow_origins(["http://a.test"]),
        allow_methods(["GET"]),
        allow_credentials(True),
    )


@pytest.fixture
def delegate():
    """Delegate handler recording its invocations"""
    return MagicMock(return_value="delegate-result")


@pytest.fixture
def test_settings():
    """Settings isolated from the environment defaults"""
    return Settings(app_name="test-service", app_version="test-version", log_level="DEBUG")


@pytest.fixture
def app(test_settings, policy):
    """Create test app"""
    return create_app(test_settings, policy=policy)


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)
