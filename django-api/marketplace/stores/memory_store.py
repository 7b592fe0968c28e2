"""In-memory implementation of the MarketplaceStore.

Records live for the lifetime of the store object. A single re-entrant lock
guards both maps, so a ledger holding ``transaction()`` sees no interleaved
writes from other request threads.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from typing import Any

from django.utils import timezone

from marketplace.domain import Enrollment, NewSession, NewUser, Session, SessionId, User, UserId
from marketplace.domain.models import DEFAULT_STARTING_POINTS
from marketplace.domain.value_objects import Rating, meeting_room_id_for
from marketplace.stores.interfaces import MarketplaceStore


class InMemoryMarketplaceStore(MarketplaceStore):
    """Dict-backed store used by default and in tests."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: dict[UserId, User] = {}
        self._sessions: dict[SessionId, Session] = {}

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def get_user(self, user_id: UserId) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.username == username), None)

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def list_users(self) -> list[User]:
        with self._lock:
            return sorted(self._users.values(), key=lambda u: u.created_at)

    def create_user(self, data: NewUser) -> User:
        user = User(
            id=UserId.new(),
            username=data.username,
            email=data.email,
            full_name=data.full_name,
            bio=data.bio or "",
            points=DEFAULT_STARTING_POINTS if data.points is None else data.points,
            teachable_skills=tuple(data.teachable_skills),
            learning_skills=tuple(data.learning_skills),
            sessions_hosted=0,
            sessions_attended=0,
            average_rating=Rating(0),
            created_at=timezone.now(),
        )
        with self._lock:
            self._users[user.id] = user
        return user

    def update_user(self, user_id: UserId, **fields: Any) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            updated = replace(user, **fields)
            self._users[user_id] = updated
            return updated

    def get_session(self, session_id: SessionId) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id)

    def list_sessions(self) -> list[Session]:
        with self._lock:
            return sorted(self._sessions.values(), key=lambda s: s.starts_at)

    def get_sessions_by_host(self, host_id: UserId) -> list[Session]:
        with self._lock:
            return [s for s in self._sessions.values() if s.host_id == host_id]

    def get_sessions_by_participant(self, user_id: UserId) -> list[Session]:
        with self._lock:
            return [s for s in self._sessions.values() if s.has_participant(user_id)]

    def create_session(self, data: NewSession) -> Session:
        session_id = SessionId.new()
        session = Session(
            id=session_id,
            title=data.title,
            description=data.description,
            host_id=data.host_id,
            category=data.category,
            level=data.level,
            max_participants=data.max_participants,
            cost=data.cost,
            starts_at=data.starts_at,
            duration=data.duration,
            meeting_room_id=meeting_room_id_for(session_id, data.title),
            created_at=timezone.now(),
        )
        with self._lock:
            self._sessions[session_id] = session
        return session

    def update_session(self, session_id: SessionId, **fields: Any) -> Session | None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            updated = replace(session, **fields)
            self._sessions[session_id] = updated
            return updated

    def add_enrollment(self, session_id: SessionId, enrollment: Enrollment) -> Session | None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            return self.update_session(
                session_id, enrollments=session.enrollments + (enrollment,)
            )

    def remove_enrollment(self, session_id: SessionId, user_id: UserId) -> Session | None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            remaining = tuple(e for e in session.enrollments if e.user_id != user_id)
            return self.update_session(session_id, enrollments=remaining)
