"""
Pytest configuration and shared fixtures.
"""

import pytest

from physanalysis.models.display import options


@pytest.fixture
def display_options():
    """Provide the global display options, restored after the test."""
    snapshot = options.model_copy(deep=True)
    yield options
    options.restore(snapshot)


@pytest.fixture
def consolidated(display_options):
    """Provide global display options with unit consolidation enabled."""
    display_options.consolidate_units = True
    return display_options


@pytest.fixture
def pint_registry():
    """Provide a pint registry used as an independent conversion oracle."""
    pint = pytest.importorskip("pint")
    return pint.UnitRegistry()
