"""Shared pytest fixtures for trip_animator workflow tests.

Workflow tests run against the sample route file shipped with the package.
Minimal fixtures: keep conftest.py minimal.
"""

import pytest

from trip_animator.constants import DataConfig
from trip_animator.core.session import ReplaySession
from trip_animator.core.trip_catalog import TripCatalog


@pytest.fixture
def shipped_catalog() -> TripCatalog:
    """Catalog loaded from the sample route.json (strict)."""
    return TripCatalog.from_file(DataConfig.ROUTE_FILE)


@pytest.fixture
def shipped_session(shipped_catalog: TripCatalog) -> ReplaySession:
    return ReplaySession(catalog=shipped_catalog)
