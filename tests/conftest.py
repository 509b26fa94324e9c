import pytest

from flood_ledger.core.config import settings
from flood_ledger.services.block_clock import BlockClock
from flood_ledger.services.ledger import FloodMonitoringLedger

PROVIDER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
BLOCK_HEIGHT = 100


@pytest.fixture
def ledger():
    """Fresh ledger with no providers, thresholds, readings or alerts."""
    return FloodMonitoringLedger()


@pytest.fixture
def provider():
    return PROVIDER


@pytest.fixture
def authorized_ledger(ledger, provider):
    """Ledger with the default provider authorized."""
    ledger.authorize_provider(provider)
    return ledger


@pytest.fixture
def block_clock():
    return BlockClock(BLOCK_HEIGHT)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: Mark tests as API tests")
    config.addinivalue_line("markers", "core: Mark tests as Core tests")
    config.addinivalue_line("markers", "services: Mark tests as Service tests")


def pytest_collection_modifyitems(items):
    """Add markers based on directory structure."""
    for item in items:
        path = str(item.fspath)

        if "test_api" in path:
            item.add_marker("api")

        if "test_core" in path:
            item.add_marker("core")

        if "test_services" in path:
            item.add_marker("services")


@pytest.fixture
def client(monkeypatch):
    """
    Test client over a fresh ledger whose block clock starts at BLOCK_HEIGHT.
    """
    from fastapi.testclient import TestClient

    from flood_ledger.main import app

    monkeypatch.setattr(settings, "initial_block_height", BLOCK_HEIGHT)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def provider_headers(provider):
    return {settings.provider_header: provider}
