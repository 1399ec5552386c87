"""
Pytest configuration and shared fixtures for toggl-client testing.

Provides credentials, registries, fake transport sessions and a response
factory so the request pipeline can be exercised without network access.
"""

import json
import os
from http import HTTPStatus
from pathlib import Path
from typing import Any, Callable, Optional
from unittest.mock import Mock

import pytest
import requests
import yaml

from toggl_client.api.authentication import APIKey
from toggl_client.api.client import TogglClient
from toggl_client.api.endpoints import Endpoint, EndpointKind
from toggl_client.api.registry import ResourceRegistry

from .fixtures.sample_data import TEST_TOKEN, TEST_URL


def build_response(
    status_code: int = 200,
    body: Any = None,
    reason: Optional[str] = None,
    url: str = TEST_URL
) -> requests.Response:
    """Build a real requests.Response without touching the network.

    ``body`` may be bytes/str (sent verbatim) or any JSON-serializable object.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason if reason is not None else HTTPStatus(status_code).phrase
    response.url = url
    response.encoding = 'utf-8'

    if body is None:
        response._content = b''
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'

    return response


@pytest.fixture
def response_factory() -> Callable[..., requests.Response]:
    """Factory for fake HTTP responses"""
    return build_response


@pytest.fixture
def api_key():
    """Credential using the Toggl token convention"""
    return APIKey(token=TEST_TOKEN)


@pytest.fixture
def registry():
    """Registry with a single test resource"""
    registry = ResourceRegistry()
    registry.add_endpoint("x", Endpoint.of(EndpointKind.WORKSPACES, TEST_URL))
    return registry


@pytest.fixture
def default_registry():
    """Registry holding the standard Toggl resources"""
    return ResourceRegistry.with_defaults()


@pytest.fixture
def mock_session():
    """Transport session whose send() returns an empty 200 unless overridden"""
    session = Mock(spec=requests.Session)
    session.send.return_value = build_response(200, {})
    return session


@pytest.fixture
def client(api_key, registry, mock_session):
    """Client wired to the test registry and the fake session"""
    return TogglClient(api_key, registry, session=mock_session)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TOGGL_* variables so configuration tests see a known environment"""
    for key in list(os.environ):
        if key.startswith("TOGGL_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def temp_config_dir(tmp_path) -> Path:
    """Temporary directory holding a default configuration file"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_config = {
        "api": {
            "token": TEST_TOKEN,
            "timeout": 15,
        },
        "logging": {
            "level": "DEBUG",
            "log_to_console": False,
        },
        "endpoints": {
            "workspaces": "http://localhost:8080/api/v8/workspaces",
        },
    }

    with open(config_dir / "default_config.yaml", "w") as f:
        yaml.dump(default_config, f)

    return config_dir
