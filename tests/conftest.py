"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest


# Add app directory to path
APP_DIR = Path(__file__).parent.parent / "app"
sys.path.insert(0, str(APP_DIR))


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as an async test"
    )


@pytest.fixture
def config():
    """Default configuration, independent of any user config on the machine."""
    from greeting_mcp.config import GreetingServerConfig

    return GreetingServerConfig()


@pytest.fixture
def no_token(monkeypatch):
    """Make sure the image API token is not set."""
    monkeypatch.delenv("HF_TOKEN", raising=False)


@pytest.fixture
def hf_token(monkeypatch):
    """Set a dummy image API token."""
    monkeypatch.setenv("HF_TOKEN", "hf_test_token")
    return "hf_test_token"
