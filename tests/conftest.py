"""Shared test fixtures for hip roof calculator tests."""
import logging
import pytest
from superroofer.config import CalculatorConfig, GuardMode
from superroofer.calculators import RoofGeometry
from superroofer.models import RoofInputs


@pytest.fixture
def roof():
    """Fresh roof with default inputs and derived fields at 0."""
    return RoofGeometry()


@pytest.fixture
def seeded_roof():
    """Roof whose derived fields hold positive leftovers, so any guard mode passes."""
    return RoofGeometry(height=1.0, ridge_length=2.0, hip_length=3.0)


@pytest.fixture
def strict_config():
    return CalculatorConfig(guard_mode=GuardMode.ALL_FIELDS)


@pytest.fixture
def default_inputs():
    return RoofInputs()


@pytest.fixture
def restore_root_logging():
    """Remove the handlers setup_logging() installs on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
