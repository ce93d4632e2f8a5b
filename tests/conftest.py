"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.core import config
from app.main import create_app


@pytest.fixture(scope="function")
def app() -> FastAPI:
    """Creates a FastAPI app for tests (function-scoped).

    The test environment disables FastAPI debug mode so the registered
    exception handlers render errors instead of the debug traceback page.
    """
    config.settings.environment = "test"

    fastapi_app = create_app()

    return fastapi_app


@pytest.fixture(scope="function")
def http_client(app: FastAPI) -> TestClient:
    """Creates a synchronous http client."""
    return TestClient(app)


@pytest_asyncio.fixture(scope="function")
async def async_http_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Creates an async http client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
