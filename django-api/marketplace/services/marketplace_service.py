"""Marketplace service - directory reads and profile commands.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from marketplace.domain import MeetingRoom, NewUser, Session, SessionId, User, UserId
from marketplace.domain.errors import (
    EmailTakenError,
    InvalidIdError,
    MeetingAccessDeniedError,
    SessionNotFoundError,
    UsernameTakenError,
    UserNotFoundError,
)
from marketplace.services.meeting_gate import MeetingRoomGate
from marketplace.stores.interfaces import MarketplaceStore

logger = logging.getLogger(__name__)


def parse_user_id(value: str) -> UserId:
    """Parse a path or body value into a UserId, raising InvalidIdError if malformed."""
    try:
        return UserId.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidIdError() from exc


def parse_session_id(value: str) -> SessionId:
    try:
        return SessionId.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidIdError() from exc


def _dedupe(skills) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for skill in skills:
        skill = skill.strip()
        if skill:
            seen.setdefault(skill, None)
    return tuple(seen)


class MarketplaceService:
    """Service for user directory and session catalog operations."""

    def __init__(self, store: MarketplaceStore, gate: MeetingRoomGate, current_username: str) -> None:
        self._store = store
        self._gate = gate
        self._current_username = current_username

    def current_user(self) -> User:
        """Return the user acting on this deployment.

        Raises:
            UserNotFoundError: If no user has the configured username.
        """
        user = self._store.get_user_by_username(self._current_username)
        if user is None:
            raise UserNotFoundError(self._current_username)
        return user

    def get_user(self, user_id: str) -> User:
        """Return a user by ID.

        Raises:
            InvalidIdError: If the user_id is not a valid UUID.
            UserNotFoundError: If the user does not exist.
        """
        user = self._store.get_user(parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[User]:
        """Return the user directory, oldest account first."""
        return self._store.list_users()

    def register_user(self, data: NewUser) -> User:
        """Create a user with a unique username and email.

        Raises:
            UsernameTakenError: If the username is in use.
            EmailTakenError: If the email is in use.
        """
        with self._store.transaction():
            self._ensure_available(data.username, data.email)
            user = self._store.create_user(
                NewUser(
                    username=data.username,
                    email=data.email,
                    full_name=data.full_name,
                    bio=data.bio,
                    points=data.points,
                    teachable_skills=_dedupe(data.teachable_skills),
                    learning_skills=_dedupe(data.learning_skills),
                )
            )
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def update_profile(
        self,
        user_id: str,
        *,
        full_name: str | None = None,
        bio: str | None = None,
        username: str | None = None,
        email: str | None = None,
    ) -> User:
        """Change a user's public profile fields.

        Raises:
            InvalidIdError, UserNotFoundError, UsernameTakenError, EmailTakenError
        """
        uid = parse_user_id(user_id)
        changes = {
            name: value
            for name, value in (
                ("full_name", full_name),
                ("bio", bio),
                ("username", username),
                ("email", email),
            )
            if value is not None
        }
        with self._store.transaction():
            user = self._store.get_user(uid)
            if user is None:
                raise UserNotFoundError(user_id)
            self._ensure_available(username, email, exclude=uid)
            if changes:
                user = self._store.update_user(uid, **changes)
        return user

    def set_skills(
        self,
        user_id: str,
        *,
        teachable: list[str] | None = None,
        learning: list[str] | None = None,
    ) -> User:
        """Replace a user's skill lists. Duplicates and blanks are dropped."""
        uid = parse_user_id(user_id)
        changes = {}
        if teachable is not None:
            changes["teachable_skills"] = _dedupe(teachable)
        if learning is not None:
            changes["learning_skills"] = _dedupe(learning)
        with self._store.transaction():
            user = self._store.update_user(uid, **changes) if changes else self._store.get_user(uid)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def set_points(self, user_id: str, points: int) -> User:
        """Overwrite a user's balance."""
        if points < 0:
            raise ValueError("Points cannot be negative")
        uid = parse_user_id(user_id)
        with self._store.transaction():
            user = self._store.update_user(uid, points=points)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Points of user %s set to %d", uid, points)
        return user

    def list_sessions(self) -> list[Session]:
        """Return all sessions, soonest first."""
        return self._store.list_sessions()

    def get_session(self, session_id: str) -> Session:
        """Return a session by ID.

        Raises:
            InvalidIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
        """
        session = self._store.get_session(parse_session_id(session_id))
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def sessions_hosted_by(self, user_id: str) -> list[Session]:
        return self._store.get_sessions_by_host(parse_user_id(user_id))

    def sessions_attended_by(self, user_id: str) -> list[Session]:
        return self._store.get_sessions_by_participant(parse_user_id(user_id))

    def hosts_for(self, sessions: list[Session]) -> dict[UserId, User]:
        """Look up the host of each session, skipping hosts that no longer exist."""
        hosts: dict[UserId, User] = {}
        for session in sessions:
            if session.host_id not in hosts:
                host = self._store.get_user(session.host_id)
                if host is not None:
                    hosts[session.host_id] = host
        return hosts

    def meeting_room_for(self, session_id: str, user: User) -> MeetingRoom:
        """Return the meeting room if the user may enter it.

        Raises:
            InvalidIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
            MeetingAccessDeniedError: If the user is neither host nor participant,
                or the session is completed.
        """
        room = self._gate.get_meeting_room(parse_session_id(session_id))
        if room is None:
            raise SessionNotFoundError(session_id)
        if not self._gate.can_access(room, user.id):
            logger.info("Denied meeting access to user %s for session %s", user.id, session_id)
            raise MeetingAccessDeniedError(session_id)
        return room

    def _ensure_available(
        self,
        username: str | None,
        email: str | None,
        exclude: UserId | None = None,
    ) -> None:
        if username is not None:
            other = self._store.get_user_by_username(username)
            if other is not None and other.id != exclude:
                raise UsernameTakenError(username)
        if email is not None:
            other = self._store.get_user_by_email(email)
            if other is not None and other.id != exclude:
                raise EmailTakenError(email)
