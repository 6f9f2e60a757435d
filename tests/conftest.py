"""
Pytest configuration and shared fixtures for specialist router tests.
"""
import pytest
import pytest_asyncio
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from specialist_server.specialist_router import (
    Registry,
    RegistryHolder,
    SpecialistProfile,
    SpecialistRouter,
    default_registry,
)


@pytest.fixture
def small_registry():
    """
    Registry with a graphics profile, a networking profile gated on
    multiplayer, and the generalist fallback.
    """
    return Registry(
        [
            SpecialistProfile(id="generalist", description="Fallback"),
            SpecialistProfile(
                id="graphics",
                keywords={"shader": 3, "rendering": 2, "hologram": 3},
                priority=10,
            ),
            SpecialistProfile(
                id="networking",
                keywords={"multiplayer": 3, "netcode": 3},
                prerequisites=["multiplayer"],
                priority=20,
            ),
        ]
    )


@pytest.fixture
def unity_registry():
    """The built-in Unity catalog."""
    return default_registry()


@pytest.fixture
def specialist_router(small_registry):
    """A SpecialistRouter over the small registry."""
    return SpecialistRouter(RegistryHolder(small_registry))


@pytest_asyncio.fixture
async def test_app():
    """Provide a test FastAPI app instance."""
    # Import here to avoid circular imports
    from specialist_server.main import app
    return app


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test"
    ) as client:
        yield client
