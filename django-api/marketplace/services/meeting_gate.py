"""Meeting room gate - who may enter a session's video call, and when."""

import logging

from marketplace.domain import MeetingRoom, Session, SessionId, UserId
from marketplace.stores.interfaces import MarketplaceStore

logger = logging.getLogger(__name__)


class MeetingRoomGate:
    """Access and lifecycle of the video-call room attached to each session."""

    def __init__(self, store: MarketplaceStore) -> None:
        self._store = store

    def get_meeting_room(self, session_id: SessionId) -> MeetingRoom | None:
        session = self._store.get_session(session_id)
        if session is None:
            return None
        return MeetingRoom(
            session_id=session.id,
            meeting_room_id=session.meeting_room_id,
            meeting_started=session.meeting_started,
            is_completed=session.is_completed,
            session_title=session.title,
            host_id=session.host_id,
            participants=session.participants,
        )

    @staticmethod
    def can_access(room: MeetingRoom, user_id: UserId) -> bool:
        """Only the host and enrolled participants may enter an open room."""
        if room.is_completed:
            return False
        return user_id == room.host_id or user_id in room.participants

    def start_meeting(self, session_id: SessionId) -> Session | None:
        """Open the room. Starting an already started meeting changes nothing."""
        with self._store.transaction():
            session = self._store.get_session(session_id)
            if session is None or session.meeting_started:
                return session
            session = self._store.update_session(session_id, meeting_started=True)
        logger.info("Meeting %s started for session %s", session.meeting_room_id, session_id)
        return session

    def end_meeting(self, session_id: SessionId) -> Session | None:
        """Close the room and mark the session completed. Idempotent."""
        with self._store.transaction():
            session = self._store.get_session(session_id)
            if session is None or session.is_completed:
                return session
            session = self._store.update_session(session_id, is_completed=True)
        logger.info("Meeting %s ended, session %s completed", session.meeting_room_id, session_id)
        return session
