"""Shared pytest fixtures for analemma tests."""

import numpy as np
import pytest

from analemma.config import Configurator, OrbitalParameters
from analemma.engine import SolarEngine


@pytest.fixture
def earth():
    """Return Earth's default orbital parameters."""
    return OrbitalParameters()


@pytest.fixture
def default_config():
    """Return a default Configurator (Earth, 40 N)."""
    return Configurator()


@pytest.fixture
def engine(default_config):
    """Return an engine for the default configuration."""
    return SolarEngine(default_config)


@pytest.fixture
def year():
    """Every integer day of the (non-leap) year."""
    return np.arange(1, 366, dtype=float)


@pytest.fixture(params=[0.0, 10.0, 23.44, 45.0, 89.0])
def any_tilt(request):
    """Parametrized tilt values across the valid range."""
    return request.param
