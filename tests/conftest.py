"""Shared pytest fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from prototype.main import create_version_app


@pytest.fixture
def client():
    """Client for the full application (all configured versions)."""
    from prototype.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def mount():
    """Return a client for a root app with *sub_app* mounted at /<version>."""

    def _mount(version: str, sub_app: FastAPI | None = None) -> TestClient:
        root = FastAPI()
        root.mount(f"/{version}", sub_app or create_version_app(version))
        return TestClient(root)

    return _mount
