"""Unit tests for EnrollmentLedger.

Run with: pytest tests/test_ledger.py -v
"""

import threading
from datetime import datetime, timezone

import pytest

from marketplace.domain import Capacity, EnrollmentOutcome, Level, NewSession, SessionId, UserId


def _assert_consistent(session):
    assert session.current_participants == len(session.participants)
    assert len(set(session.participants)) == len(session.participants)


class TestJoinSession:
    """Tests for join_session."""

    def test_scenario_join_debits_points_and_takes_a_seat(self, store, ledger, make_user, make_session, fill_session):
        """15 points, cost 2, 5/10 seats -> 13 points, one more attended, 6/10 seats."""
        session = make_session(cost=2, max_participants=10)
        fill_session(session, 5)
        user = make_user(points=15)

        result = ledger.join_session(session.id, user.id)

        assert result.ok
        assert result.outcome is EnrollmentOutcome.OK
        assert result.user.points == 13
        assert result.user.sessions_attended == user.sessions_attended + 1
        assert result.session.current_participants == 6
        assert store.get_session(session.id) == result.session
        assert store.get_user(user.id) == result.user
        _assert_consistent(result.session)

    def test_scenario_insufficient_points_changes_nothing(self, store, ledger, make_user, make_session):
        """1 point against cost 2 fails and leaves both records untouched."""
        session = make_session(cost=2)
        user = make_user(points=1)

        result = ledger.join_session(session.id, user.id)

        assert not result.ok
        assert result.outcome is EnrollmentOutcome.INSUFFICIENT_POINTS
        assert store.get_user(user.id) == user
        assert store.get_session(session.id) == session

    def test_scenario_full_session_rejects_anyone(self, store, ledger, make_user, make_session, fill_session):
        """10/10 seats: another user cannot join and participants stay the same."""
        session = make_session(max_participants=10)
        fill_session(session, 10)
        before = store.get_session(session.id)
        user = make_user(points=100)

        result = ledger.join_session(session.id, user.id)

        assert result.outcome is EnrollmentOutcome.SESSION_FULL
        assert store.get_session(session.id).participants == before.participants
        assert store.get_user(user.id) == user

    def test_exact_balance_is_enough(self, ledger, make_user, make_session):
        session = make_session(cost=5)
        result = ledger.join_session(session.id, make_user(points=5).id)
        assert result.ok
        assert result.user.points == 0

    def test_free_session(self, ledger, make_user, make_session):
        session = make_session(cost=0)
        result = ledger.join_session(session.id, make_user(points=0).id)
        assert result.ok

    def test_second_join_is_a_no_op(self, store, ledger, make_user, make_session):
        """A retried join after success fails and mutates nothing."""
        session = make_session(cost=2)
        user = make_user(points=10)
        assert ledger.join_session(session.id, user.id).ok
        session_after, user_after = store.get_session(session.id), store.get_user(user.id)

        result = ledger.join_session(session.id, user.id)

        assert result.outcome is EnrollmentOutcome.ALREADY_ENROLLED
        assert store.get_session(session.id) == session_after
        assert store.get_user(user.id) == user_after

    def test_unknown_session(self, ledger, make_user):
        result = ledger.join_session(SessionId.new(), make_user().id)
        assert result.outcome is EnrollmentOutcome.SESSION_NOT_FOUND
        assert result.session is None

    def test_unknown_user(self, store, ledger, make_session):
        session = make_session()
        result = ledger.join_session(session.id, UserId.new())
        assert result.outcome is EnrollmentOutcome.USER_NOT_FOUND
        assert store.get_session(session.id) == session

    def test_membership_checked_before_capacity(self, ledger, make_user, make_session, fill_session):
        """A participant of a full session is told they are enrolled, not that it is full."""
        session = make_session(max_participants=1)
        member = make_user(points=10)
        assert ledger.join_session(session.id, member.id).ok
        assert ledger.join_session(session.id, member.id).outcome is EnrollmentOutcome.ALREADY_ENROLLED

    def test_capacity_checked_before_balance(self, ledger, make_user, make_session, fill_session):
        session = make_session(max_participants=1, cost=50)
        fill_session(session, 1)
        result = ledger.join_session(session.id, make_user(points=0).id)
        assert result.outcome is EnrollmentOutcome.SESSION_FULL

    def test_host_may_join_own_session(self, ledger, make_user, make_session):
        host = make_user(points=20)
        session = make_session(host)
        result = ledger.join_session(session.id, host.id)
        assert result.ok
        assert host.id in result.session.participants

    def test_concurrent_joins_never_exceed_capacity(self, store, ledger, make_user, make_session):
        """Threads racing for the last seats cannot overbook a session."""
        session = make_session(max_participants=3, cost=1)
        users = [make_user(points=5) for _ in range(12)]
        barrier = threading.Barrier(len(users))
        outcomes = []

        def worker(uid):
            barrier.wait()
            outcomes.append(ledger.join_session(session.id, uid).outcome)

        threads = [threading.Thread(target=worker, args=(u.id,)) for u in users]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        final = store.get_session(session.id)
        assert outcomes.count(EnrollmentOutcome.OK) == 3
        assert final.current_participants == 3
        _assert_consistent(final)
        charged = [u for u in users if store.get_user(u.id).points == 4]
        assert len(charged) == 3


class TestLeaveSession:
    """Tests for leave_session."""

    def test_scenario_leave_restores_balance_and_seat(self, store, ledger, make_user, make_session, fill_session):
        """Join then leave returns points, attendance and seats to where they were."""
        session = make_session(cost=2, max_participants=10)
        fill_session(session, 5)
        user = make_user(points=15)
        assert ledger.join_session(session.id, user.id).ok

        result = ledger.leave_session(session.id, user.id)

        assert result.ok
        assert result.user.points == 15
        assert result.user.sessions_attended == user.sessions_attended
        assert result.session.current_participants == 5
        assert user.id not in result.session.participants
        _assert_consistent(result.session)

    def test_not_enrolled(self, store, ledger, make_user, make_session):
        session = make_session()
        user = make_user()
        result = ledger.leave_session(session.id, user.id)
        assert result.outcome is EnrollmentOutcome.NOT_ENROLLED
        assert store.get_user(user.id) == user

    def test_unknown_session_and_user(self, ledger, make_user, make_session):
        assert ledger.leave_session(SessionId.new(), make_user().id).outcome is EnrollmentOutcome.SESSION_NOT_FOUND
        assert ledger.leave_session(make_session().id, UserId.new()).outcome is EnrollmentOutcome.USER_NOT_FOUND

    def test_attendance_never_goes_negative(self, store, ledger, make_user, make_session):
        session = make_session()
        user = make_user(points=10)
        assert ledger.join_session(session.id, user.id).ok
        store.update_user(user.id, sessions_attended=0)

        result = ledger.leave_session(session.id, user.id)

        assert result.user.sessions_attended == 0

    def test_refund_uses_amount_paid_after_cost_change(self, ledger, make_user, make_session):
        """Raising the cost after a join does not inflate the refund."""
        session = make_session(cost=2)
        user = make_user(points=10)
        assert ledger.join_session(session.id, user.id).ok
        ledger.update_session_details(session.id, cost=7)

        result = ledger.leave_session(session.id, user.id)

        assert result.user.points == 10

    def test_rejoin_after_leave_charges_current_cost(self, ledger, make_user, make_session):
        session = make_session(cost=2)
        user = make_user(points=10)
        ledger.join_session(session.id, user.id)
        ledger.leave_session(session.id, user.id)
        ledger.update_session_details(session.id, cost=3)

        result = ledger.join_session(session.id, user.id)

        assert result.user.points == 7
        assert result.session.enrollment_for(user.id).points_paid == 3


class TestCreateSession:
    """Tests for create_session."""

    def test_scenario_counts_hosted_and_assigns_room(self, store, ledger, make_user, make_session):
        """Each created session gets its own room and bumps the host counter by one."""
        host = make_user()
        first = make_session(host, title="Intro to React")
        second = make_session(host, title="Intro to React")

        assert first.meeting_room_id
        assert first.meeting_room_id != second.meeting_room_id
        assert store.get_user(host.id).sessions_hosted == host.sessions_hosted + 2

    def test_unknown_host_creates_nothing(self, store, ledger):
        ghost = UserId.new()
        data = NewSession(
            title="Ghost",
            description="",
            host_id=ghost,
            category="Misc",
            level=Level.BEGINNER,
            max_participants=Capacity(5),
            cost=1,
            starts_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
            duration=30,
        )
        assert ledger.create_session(ghost, data) is None
        assert store.list_sessions() == []

    def test_host_argument_wins_over_payload(self, ledger, make_user, make_session):
        host, other = make_user(), make_user()
        session = make_session(other)
        data = NewSession(
            title="Mine",
            description="",
            host_id=other.id,
            category="Misc",
            level=Level.BEGINNER,
            max_participants=Capacity(5),
            cost=1,
            starts_at=session.starts_at,
            duration=30,
        )
        created = ledger.create_session(host.id, data)
        assert created.host_id == host.id


class TestUpdateSessionDetails:
    """Tests for update_session_details."""

    def test_updates_only_given_fields(self, ledger, make_session):
        session = make_session(cost=2)
        updated = ledger.update_session_details(session.id, title="New title", level=Level.ADVANCED)
        assert updated.title == "New title"
        assert updated.level is Level.ADVANCED
        assert updated.cost == 2
        assert updated.meeting_room_id == session.meeting_room_id

    def test_lowering_capacity_blocks_new_joins(self, ledger, make_user, make_session, fill_session):
        session = make_session(max_participants=5)
        fill_session(session, 2)
        ledger.update_session_details(session.id, max_participants=Capacity(2))
        result = ledger.join_session(session.id, make_user(points=10).id)
        assert result.outcome is EnrollmentOutcome.SESSION_FULL

    def test_unknown_session(self, ledger):
        assert ledger.update_session_details(SessionId.new(), title="x") is None

    @pytest.mark.parametrize("changes", [{}, {"title": None}])
    def test_no_changes_returns_current(self, ledger, make_session, changes):
        session = make_session()
        assert ledger.update_session_details(session.id, **changes) == session
