"""
Pytest configuration and fixtures following kkb_fastapi pattern.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.config import ConfigFile, get_config
from app.create_app import get_app
from app.services.loaders import load_record_store
from app.services.selectors import EmissionSelector
from app.test.factory.emission_record import EmissionRecordFactory
from app.test.factory.facility import FacilityFactory

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration pointing at the bundled dataset.
    """
    return get_config(ConfigFile.TEST)


@pytest.fixture(scope="session")
def record_store(test_config):
    """Bundled dataset, loaded once per session."""
    return load_record_store(test_config)


@pytest.fixture
def emission_selector(record_store):
    """Selector over the bundled dataset."""
    return EmissionSelector(record_store)


@pytest.fixture
def sample_facilities():
    """
    Four facilities of three companies.

    Two facilities share the company name "Tata Steel".
    """
    return [
        FacilityFactory(id="F001", name="Tata Steel", description="Tata Steel - Jamshedpur Plant"),
        FacilityFactory(id="F002", name="JSW Energy", description="JSW Energy - Goa Facility"),
        FacilityFactory(id="F003", name="Adani Green", description="Adani Solar - Rajasthan"),
        FacilityFactory(id="F004", name="Tata Steel", description="Processing - Pune"),
    ]


@pytest.fixture
def sample_records():
    """
    Records for companies A (100), B (300) and C (200) across all scopes.
    """
    return [
        EmissionRecordFactory(
            facility_id="FA", facility_name="A", scope="Scope 1", ghg_type="CO₂",
            reporting_period="2022 Q2", emissions=100.0,
        ),
        EmissionRecordFactory(
            facility_id="FB", facility_name="B", scope="Scope 2", ghg_type="CH₄",
            reporting_period="2023 Q1", emissions=250.0,
        ),
        EmissionRecordFactory(
            facility_id="FC", facility_name="C", scope="Scope 3", ghg_type="N₂O",
            reporting_period="2022 Q1", emissions=200.0,
        ),
        EmissionRecordFactory(
            facility_id="FB", facility_name="B", scope="Scope 1", ghg_type="CO₂",
            reporting_period="2023 Q1", emissions=50.0,
        ),
    ]


@pytest_asyncio.fixture(scope="function")
async def test_app(test_config):
    """
    Create FastAPI application with test configuration.

    Returns configured FastAPI app instance for testing.
    """
    app = get_app(ConfigFile.TEST)
    app.state.config = test_config

    yield app


@pytest_asyncio.fixture(scope="function")
async def test_async_client(test_app):
    """
    Create async HTTP client for API testing.

    Uses httpx AsyncClient with ASGITransport for testing FastAPI endpoints.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    ) as ac:
        yield ac
