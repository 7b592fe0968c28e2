"""Enrollment ledger - keeps point balances and participant sets consistent.

Every mutation runs inside ``store.transaction()`` so the capacity and
balance checks cannot be separated from the writes they guard.
Expected failures are returned as ``EnrollmentResult`` outcomes.
"""

import logging
from dataclasses import replace
from datetime import datetime

from django.utils import timezone

from marketplace.domain import (
    Capacity,
    Enrollment,
    EnrollmentOutcome,
    EnrollmentResult,
    Level,
    NewSession,
    Session,
    SessionId,
    User,
    UserId,
)
from marketplace.stores.interfaces import MarketplaceStore

logger = logging.getLogger(__name__)


class EnrollmentLedger:
    """Join, leave and create accounting across users and sessions."""

    def __init__(self, store: MarketplaceStore) -> None:
        self._store = store

    def join_session(self, session_id: SessionId, user_id: UserId) -> EnrollmentResult:
        """Charge the user the session's cost and add them as a participant.

        Checks run in order and stop at the first failure, leaving both
        records untouched: session exists, user exists, not already
        enrolled, seat available, enough points.
        """
        with self._store.transaction():
            session = self._store.get_session(session_id)
            if session is None:
                return self._rejected("join", EnrollmentOutcome.SESSION_NOT_FOUND, session_id, user_id)
            user = self._store.get_user(user_id)
            if user is None:
                return self._rejected("join", EnrollmentOutcome.USER_NOT_FOUND, session_id, user_id, session)
            if session.has_participant(user_id):
                return self._rejected(
                    "join", EnrollmentOutcome.ALREADY_ENROLLED, session_id, user_id, session, user
                )
            if session.is_full:
                return self._rejected(
                    "join", EnrollmentOutcome.SESSION_FULL, session_id, user_id, session, user
                )
            if user.points < session.cost:
                return self._rejected(
                    "join", EnrollmentOutcome.INSUFFICIENT_POINTS, session_id, user_id, session, user
                )

            enrollment = Enrollment(user_id=user_id, points_paid=session.cost, joined_at=timezone.now())
            session = self._store.add_enrollment(session_id, enrollment)
            user = self._store.update_user(
                user_id,
                points=user.points - enrollment.points_paid,
                sessions_attended=user.sessions_attended + 1,
            )

        logger.info(
            "User %s joined session %s for %d points (%d/%d seats)",
            user_id,
            session_id,
            enrollment.points_paid,
            session.current_participants,
            session.max_participants.value,
        )
        return EnrollmentResult(outcome=EnrollmentOutcome.OK, session=session, user=user)

    def leave_session(self, session_id: SessionId, user_id: UserId) -> EnrollmentResult:
        """Remove the user from the session and refund what they paid to join."""
        with self._store.transaction():
            session = self._store.get_session(session_id)
            if session is None:
                return self._rejected("leave", EnrollmentOutcome.SESSION_NOT_FOUND, session_id, user_id)
            user = self._store.get_user(user_id)
            if user is None:
                return self._rejected("leave", EnrollmentOutcome.USER_NOT_FOUND, session_id, user_id, session)
            enrollment = session.enrollment_for(user_id)
            if enrollment is None:
                return self._rejected(
                    "leave", EnrollmentOutcome.NOT_ENROLLED, session_id, user_id, session, user
                )

            session = self._store.remove_enrollment(session_id, user_id)
            user = self._store.update_user(
                user_id,
                points=user.points + enrollment.points_paid,
                sessions_attended=max(0, user.sessions_attended - 1),
            )

        logger.info(
            "User %s left session %s, refunded %d points",
            user_id,
            session_id,
            enrollment.points_paid,
        )
        return EnrollmentResult(outcome=EnrollmentOutcome.OK, session=session, user=user)

    def create_session(self, host_id: UserId, data: NewSession) -> Session | None:
        """Schedule a session for an existing host and count it as hosted.

        Returns None if the host does not exist. ``data.host_id`` is
        ignored in favor of ``host_id``.
        """
        with self._store.transaction():
            host = self._store.get_user(host_id)
            if host is None:
                logger.info("Rejected session creation: host %s not found", host_id)
                return None
            if data.host_id != host_id:
                data = replace(data, host_id=host_id)
            session = self._store.create_session(data)
            self._store.update_user(host_id, sessions_hosted=host.sessions_hosted + 1)

        logger.info("User %s created session %s (%s)", host_id, session.id, session.meeting_room_id)
        return session

    def update_session_details(
        self,
        session_id: SessionId,
        *,
        title: str | None = None,
        description: str | None = None,
        category: str | None = None,
        level: Level | None = None,
        max_participants: Capacity | None = None,
        cost: int | None = None,
        starts_at: datetime | None = None,
        duration: int | None = None,
    ) -> Session | None:
        """Change the editable details of a session.

        Identity, host, meeting room, participants and status flags are not
        reachable from here. Refunds use the amount recorded at join time, so
        changing ``cost`` only affects future joins.
        """
        changes = {
            name: value
            for name, value in (
                ("title", title),
                ("description", description),
                ("category", category),
                ("level", level),
                ("max_participants", max_participants),
                ("cost", cost),
                ("starts_at", starts_at),
                ("duration", duration),
            )
            if value is not None
        }
        with self._store.transaction():
            if not changes:
                return self._store.get_session(session_id)
            session = self._store.update_session(session_id, **changes)

        if session is not None:
            logger.info("Session %s updated: %s", session_id, ", ".join(sorted(changes)))
        return session

    def _rejected(
        self,
        action: str,
        outcome: EnrollmentOutcome,
        session_id: SessionId,
        user_id: UserId,
        session: Session | None = None,
        user: User | None = None,
    ) -> EnrollmentResult:
        logger.info(
            "Rejected %s of session %s by user %s: %s",
            action,
            session_id,
            user_id,
            outcome.value,
        )
        return EnrollmentResult.failed(outcome, session=session, user=user)
