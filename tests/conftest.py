import pytest
from core.observability.log_setup import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging("WARNING")
