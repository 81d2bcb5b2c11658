"""
Shared fixtures for store and web tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient

from backend.src.store import InMemoryTaskStore
from backend.src.web.config import AppConfig
from backend.src.web.main import create_app


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def client(store):
    app = create_app(config=AppConfig(), store=store)
    with TestClient(app) as test_client:
        yield test_client
