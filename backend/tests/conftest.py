"""
Shared fixtures for all tests.
"""
import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from analysehub.main import app
from analysehub.models import (
    DEFAULT_METRICS,
    Ad,
    AdSet,
    Campaign,
    DashboardData,
)
from analysehub.state import DashboardStore


class FakeClock:
    """Controllable replacement for ``datetime.now``."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    """Clock frozen at 2026-03-15 12:00, advanced manually."""
    return FakeClock(datetime(2026, 3, 15, 12, 0, 0))


@pytest.fixture
def sample_data():
    """Two campaigns with nested ad sets and ads."""
    return DashboardData(
        campaigns=[
            Campaign(id="c1", name="Summer Sale", status="ACTIVE"),
            Campaign(id="c2", name="Winter Promo", status="PAUSED"),
        ],
        adsets={
            "c1": [
                AdSet(id="as1", name="Lookalike Buyers", status="ACTIVE"),
                AdSet(id="as2", name="Retargeting 7d", status="ACTIVE"),
            ],
            "c2": [
                AdSet(id="as3", name="Broad Audience", status="PAUSED"),
            ],
        },
        ads={
            "as1": [
                Ad(id="a1", name="Carousel Summer", status="ACTIVE"),
                Ad(id="a2", name="Video 15s", status="ACTIVE"),
            ],
            "as2": [
                Ad(id="a3", name="Static Banner", status="ACTIVE"),
            ],
            "as3": [
                Ad(id="a4", name="Snow Story", status="PAUSED"),
            ],
        },
        metrics=list(DEFAULT_METRICS),
    )


@pytest.fixture
def store(clock, sample_data):
    """Store populated with ``sample_data`` and driven by ``clock``."""
    return DashboardStore(clock=clock, data=sample_data)


@pytest.fixture
def events(store):
    """Change events emitted by ``store`` during the test."""
    received = []
    store.subscribe(received.append)
    return received


@pytest.fixture
def client():
    """FastAPI test client; the lifespan loads the packaged fixture data."""
    with TestClient(app) as c:
        yield c
