"""
FastAPI dependencies resolving the objects owned by the running application.

The store, loader and fixture provider are created in the app lifespan and kept
on ``app.state``; handlers receive them explicitly through these functions.
"""
from fastapi import Request

from analysehub.services import DashboardLoader, DataProvider
from analysehub.state import DashboardStore


def get_store(request: Request) -> DashboardStore:
    return request.app.state.store


def get_loader(request: Request) -> DashboardLoader:
    return request.app.state.loader


def get_fixture_provider(request: Request) -> DataProvider:
    """Provider behind the fixture data API."""
    return request.app.state.fixtures
