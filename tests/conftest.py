"""Shared pytest fixtures for solar intel tests."""

import pytest

from tests.fakes import FakeForecastClient, FakeNRELClient


@pytest.fixture()
def fake_nrel() -> FakeNRELClient:
    """Fake NREL client returning the sample payloads."""
    return FakeNRELClient()


@pytest.fixture()
def fake_forecast() -> FakeForecastClient:
    """Fake Open-Meteo client returning a generated forecast."""
    return FakeForecastClient()
