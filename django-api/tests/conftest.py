"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from marketplace.container import build_container, set_container
from marketplace.domain import Capacity, Level, NewSession, NewUser
from marketplace.services import EnrollmentLedger, MarketplaceService, MeetingRoomGate
from marketplace.stores import InMemoryMarketplaceStore

START = datetime(2024, 12, 15, 14, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryMarketplaceStore:
    return InMemoryMarketplaceStore()


@pytest.fixture
def ledger(store) -> EnrollmentLedger:
    return EnrollmentLedger(store)


@pytest.fixture
def gate(store) -> MeetingRoomGate:
    return MeetingRoomGate(store)


@pytest.fixture
def service(store, gate) -> MarketplaceService:
    return MarketplaceService(store, gate, current_username="testuser")


@pytest.fixture
def make_user(store):
    counter = iter(range(1, 1000))

    def _make(username: str | None = None, points: int | None = None, **kwargs):
        n = next(counter)
        username = username or f"user{n}"
        return store.create_user(
            NewUser(
                username=username,
                email=kwargs.pop("email", f"{username}@example.com"),
                full_name=kwargs.pop("full_name", username.title()),
                points=points,
                **kwargs,
            )
        )

    return _make


@pytest.fixture
def make_session(ledger, make_user):
    counter = iter(range(1, 1000))

    def _make(host=None, *, cost: int = 2, max_participants: int = 10, title: str | None = None, **kwargs):
        n = next(counter)
        host = host or make_user(f"host{n}")
        return ledger.create_session(
            host.id,
            NewSession(
                title=title or f"Session {n}",
                description="A learning session",
                host_id=host.id,
                category=kwargs.pop("category", "Programming"),
                level=kwargs.pop("level", Level.BEGINNER),
                max_participants=Capacity(max_participants),
                cost=cost,
                starts_at=kwargs.pop("starts_at", START + timedelta(days=n)),
                duration=kwargs.pop("duration", 60),
            ),
        )

    return _make


@pytest.fixture
def fill_session(ledger, make_user):
    """Join ``count`` fresh users to a session."""

    def _fill(session, count: int):
        for _ in range(count):
            user = make_user(points=100)
            assert ledger.join_session(session.id, user.id).ok

    return _fill


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def container(store):
    container = build_container(store=store, current_username="testuser")
    set_container(container)
    yield container
    set_container(None)
