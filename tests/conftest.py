"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Make the package importable when running from a checkout
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

import logging
import socket

import pytest
from fastapi.testclient import TestClient

from signup_server.app.core.config import Settings
from signup_server.app.main import create_app


@pytest.fixture
def app_settings():
    """Settings pinned to the default port, independent of the environment."""
    return Settings(port=3000, log_level="INFO", log_file="")


@pytest.fixture
def client(app_settings, caplog):
    """Create a test client for a freshly built app."""
    caplog.set_level(logging.INFO, logger="signup_server")
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client


@pytest.fixture
def free_port():
    """A local TCP port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
