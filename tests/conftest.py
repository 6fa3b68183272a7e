import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Leave structlog at its defaults between tests"""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
