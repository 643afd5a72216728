"""Shared test fixtures for the USSD gateway test suite."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from agromart_ussd.infrastructure.cache.session_store import InMemorySessionStore


@pytest.fixture(scope="session")
def event_loop():
    """Use a single event loop for the entire test session."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore(ttl_seconds=3600)


@pytest.fixture
def sink() -> MagicMock:
    mock_sink = MagicMock()
    mock_sink.submit = AsyncMock()
    return mock_sink


@pytest.fixture
def farmer_answers() -> list:
    """Farmer KYC answers in prompt order."""
    return [
        "John Doe",
        "+2341234567890",
        "Nigeria",
        "123 Farm Road, Lagos",
        "1234567890",
        "50",
        "Rice, Maize",
        "0.0.123456",
    ]
