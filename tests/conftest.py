"""Shared test fixtures."""
import pytest

from salecycle.core.config import SaleCycleConfig
from salecycle.services.salecycle import SaleCycle
from salecycle.services.state import InMemoryStateStorage

CLIENT_ID = "1234567"
SESSION_ID = "123456qwe"

@pytest.fixture
def config() -> SaleCycleConfig:
    return SaleCycleConfig(client_id=CLIENT_ID, session_resolver=lambda: SESSION_ID)

@pytest.fixture
def storage() -> InMemoryStateStorage:
    return InMemoryStateStorage()

@pytest.fixture
def sc(config, storage) -> SaleCycle:
    return SaleCycle(config, storage)
