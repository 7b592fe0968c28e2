"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any

from marketplace.domain import Enrollment, NewSession, NewUser, Session, SessionId, User, UserId


class MarketplaceStore(ABC):
    """Interface for user and session persistence.

    Stores perform no validation; an unknown ID yields None.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Return a context manager that serializes a read-check-write sequence."""
        ...

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    def list_users(self) -> list[User]:
        """Return all users ordered by created_at ascending."""
        ...

    @abstractmethod
    def create_user(self, data: NewUser) -> User:
        """Create a user with a fresh ID and zeroed counters."""
        ...

    @abstractmethod
    def update_user(self, user_id: UserId, **fields: Any) -> User | None:
        """Shallow-merge fields into a user. Returns None if not found."""
        ...

    @abstractmethod
    def get_session(self, session_id: SessionId) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def list_sessions(self) -> list[Session]:
        """Return all sessions ordered by starts_at ascending."""
        ...

    @abstractmethod
    def get_sessions_by_host(self, host_id: UserId) -> list[Session]:
        ...

    @abstractmethod
    def get_sessions_by_participant(self, user_id: UserId) -> list[Session]:
        ...

    @abstractmethod
    def create_session(self, data: NewSession) -> Session:
        """Create a session with a fresh ID, a meeting room and no participants."""
        ...

    @abstractmethod
    def update_session(self, session_id: SessionId, **fields: Any) -> Session | None:
        """Shallow-merge fields into a session. Returns None if not found."""
        ...

    @abstractmethod
    def add_enrollment(self, session_id: SessionId, enrollment: Enrollment) -> Session | None:
        """Append a participant to a session. Returns None if not found."""
        ...

    @abstractmethod
    def remove_enrollment(self, session_id: SessionId, user_id: UserId) -> Session | None:
        """Drop a participant from a session. Returns None if not found."""
        ...
