import pytest

import salat
from salat import api
from salat.bootstrap import build_registry


@pytest.fixture
def fresh_registry(monkeypatch):
    """Isolate tests that register methods from the process-wide registry."""
    reg = build_registry()
    monkeypatch.setattr(api, "_registry", reg)
    return reg


@pytest.fixture
def jakarta():
    return salat.Coordinate(latitude=-6.2, longitude=106.8)
