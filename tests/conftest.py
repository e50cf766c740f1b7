"""Pytest configuration and shared fixtures for garoon-rest tests."""

import pytest

from garoon_rest.auth import PasswordAuth
from garoon_rest.config import ClientConfig
from garoon_rest.request import RequestConfigBuilder
from garoon_rest.testing import MockClient

BASE_URL = "https://example.cybozu.com/g"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("GAROON_",)

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def config():
    return ClientConfig(
        base_url=BASE_URL,
        auth=PasswordAuth(username="cybozu", password="cybozu"),
    )


@pytest.fixture
def request_config_builder(config):
    return RequestConfigBuilder(config)


@pytest.fixture
def mock_client(request_config_builder):
    return MockClient(request_config_builder=request_config_builder)
