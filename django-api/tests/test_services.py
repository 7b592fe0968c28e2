"""Unit tests for MarketplaceService and MeetingRoomGate.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import pytest

from marketplace.domain import NewUser, SessionId
from marketplace.domain.errors import (
    EmailTakenError,
    ErrorCode,
    InvalidIdError,
    MeetingAccessDeniedError,
    SessionNotFoundError,
    UsernameTakenError,
    UserNotFoundError,
)


class TestMarketplaceService:
    """Tests for MarketplaceService."""

    def test_get_user_invalid_id_raises_error(self, service):
        """get_user raises InvalidIdError for malformed UUID."""
        with pytest.raises(InvalidIdError) as exc_info:
            service.get_user("user-1")
        assert exc_info.value.code is ErrorCode.INVALID_ID

    def test_get_user_not_found_raises_error(self, service):
        """get_user raises UserNotFoundError when store returns None."""
        with pytest.raises(UserNotFoundError):
            service.get_user(str(SessionId.new()))

    def test_get_session_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidIdError):
            service.get_session("not-a-uuid")

    def test_get_session_not_found_raises_error(self, service):
        with pytest.raises(SessionNotFoundError):
            service.get_session(str(SessionId.new()))

    def test_current_user_resolved_by_username(self, service, make_user):
        user = make_user("testuser")
        assert service.current_user() == user

    def test_current_user_missing(self, service):
        with pytest.raises(UserNotFoundError):
            service.current_user()

    def test_register_user_dedupes_skills(self, service):
        user = service.register_user(
            NewUser(
                username="ann",
                email="ann@example.com",
                full_name="Ann",
                teachable_skills=("Python", "Python", " SQL ", ""),
            )
        )
        assert user.teachable_skills == ("Python", "SQL")
        assert user.points == 20

    def test_register_user_rejects_taken_username(self, service, make_user):
        make_user("ann")
        with pytest.raises(UsernameTakenError):
            service.register_user(NewUser(username="ann", email="other@example.com", full_name="Ann"))

    def test_register_user_rejects_taken_email(self, service, make_user):
        make_user("ann")
        with pytest.raises(EmailTakenError):
            service.register_user(NewUser(username="bob", email="ann@example.com", full_name="Bob"))

    def test_update_profile_keeps_own_username(self, service, make_user):
        """Re-submitting your own username is not a conflict."""
        user = make_user("ann")
        updated = service.update_profile(str(user.id), username="ann", bio="Teacher")
        assert updated.bio == "Teacher"

    def test_update_profile_rejects_other_users_email(self, service, make_user):
        make_user("ann")
        bob = make_user("bob")
        with pytest.raises(EmailTakenError):
            service.update_profile(str(bob.id), email="ann@example.com")

    def test_set_skills_replaces_lists(self, service, make_user):
        user = make_user(teachable_skills=("Go",), learning_skills=("Rust",))
        updated = service.set_skills(str(user.id), teachable=["Python", "Python"])
        assert updated.teachable_skills == ("Python",)
        assert updated.learning_skills == ("Rust",)

    def test_set_points_rejects_negative(self, service, make_user):
        with pytest.raises(ValueError):
            service.set_points(str(make_user().id), -1)

    def test_hosts_for_skips_missing_hosts(self, service, make_session):
        session = make_session()
        assert list(service.hosts_for([session])) == [session.host_id]

    def test_sessions_hosted_and_attended(self, service, ledger, make_user, make_session):
        host, member = make_user(), make_user(points=10)
        session = make_session(host)
        ledger.join_session(session.id, member.id)
        assert [s.id for s in service.sessions_hosted_by(str(host.id))] == [session.id]
        assert [s.id for s in service.sessions_attended_by(str(member.id))] == [session.id]


class TestMeetingRoomGate:
    """Tests for meeting room access and lifecycle."""

    def test_room_exposes_session_details(self, gate, ledger, make_user, make_session):
        session = make_session(title="Advanced React Patterns")
        member = make_user(points=10)
        ledger.join_session(session.id, member.id)

        room = gate.get_meeting_room(session.id)

        assert room.meeting_room_id == session.meeting_room_id
        assert room.session_title == "Advanced React Patterns"
        assert room.host_id == session.host_id
        assert room.participants == (member.id,)
        assert room.meeting_started is False

    def test_unknown_room(self, gate):
        assert gate.get_meeting_room(SessionId.new()) is None
        assert gate.start_meeting(SessionId.new()) is None
        assert gate.end_meeting(SessionId.new()) is None

    def test_host_and_participants_may_enter(self, gate, ledger, make_user, make_session):
        host, member, stranger = make_user(), make_user(points=10), make_user()
        session = make_session(host)
        ledger.join_session(session.id, member.id)
        room = gate.get_meeting_room(session.id)

        assert gate.can_access(room, host.id)
        assert gate.can_access(room, member.id)
        assert not gate.can_access(room, stranger.id)

    def test_start_meeting_is_idempotent(self, gate, make_session):
        session = make_session()
        first = gate.start_meeting(session.id)
        second = gate.start_meeting(session.id)
        assert first.meeting_started is True
        assert second == first

    def test_end_meeting_closes_room(self, gate, make_session):
        session = make_session()
        gate.start_meeting(session.id)
        ended = gate.end_meeting(session.id)

        assert ended.is_completed is True
        assert ended.meeting_started is True
        assert not gate.can_access(gate.get_meeting_room(session.id), session.host_id)
        assert gate.end_meeting(session.id) == ended

    def test_meeting_room_for_denies_strangers(self, service, make_user, make_session):
        session = make_session()
        with pytest.raises(MeetingAccessDeniedError):
            service.meeting_room_for(str(session.id), make_user())

    def test_meeting_room_for_unknown_session(self, service, make_user):
        with pytest.raises(SessionNotFoundError):
            service.meeting_room_for(str(SessionId.new()), make_user())
