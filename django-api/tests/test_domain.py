"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest

from marketplace.domain import Capacity, Enrollment, Level, Rating, Session, SessionId, UserId
from marketplace.domain.value_objects import meeting_room_id_for

NOW = datetime(2024, 12, 1, tzinfo=timezone.utc)


def _session(enrollments=(), capacity=3) -> Session:
    return Session(
        id=SessionId.new(),
        title="Intro",
        description="",
        host_id=UserId.new(),
        category="Programming",
        level=Level.BEGINNER,
        max_participants=Capacity(capacity),
        cost=2,
        starts_at=NOW,
        duration=60,
        meeting_room_id="room-x-intro",
        created_at=NOW,
        enrollments=tuple(enrollments),
    )


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_zero(self):
        """Capacity can be created with zero."""
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestRating:
    """Tests for the fixed-point Rating value object."""

    def test_default_is_unrated(self):
        assert Rating().value == 0

    def test_rejects_out_of_range(self):
        """Ratings above five stars are rejected."""
        with pytest.raises(ValueError):
            Rating(51)


class TestIds:
    """Tests for UserId and SessionId."""

    def test_from_string_valid_uuid(self):
        """from_string parses valid UUID."""
        raw = "5f0c6a3e-7d1b-4b8e-9a57-3c2f1e0d9b4a"
        assert UserId.from_string(raw).value == UUID(raw)
        assert str(SessionId.from_string(raw)) == raw

    def test_from_string_invalid_uuid(self):
        """from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            SessionId.from_string("session-1")

    def test_new_ids_are_unique(self):
        assert UserId.new() != UserId.new()


class TestMeetingRoomId:
    """Tests for meeting room key derivation."""

    def test_combines_id_prefix_and_title_slug(self):
        """Title is lowercased and non-alphanumerics become dashes."""
        session_id = SessionId.from_string("5f0c6a3e-7d1b-4b8e-9a57-3c2f1e0d9b4a")
        assert meeting_room_id_for(session_id, "UI/UX Design!") == "room-5f0c6a3e-ui-ux-design-"

    def test_is_deterministic(self):
        session_id = SessionId.new()
        assert meeting_room_id_for(session_id, "React") == meeting_room_id_for(session_id, "React")


class TestSession:
    """Tests for derived participant fields."""

    def test_current_participants_matches_enrollments(self):
        """current_participants always equals the participant count."""
        members = [UserId.new(), UserId.new()]
        session = _session([Enrollment(uid, 2, NOW) for uid in members])
        assert session.participants == tuple(members)
        assert session.current_participants == 2

    def test_is_full_at_capacity(self):
        session = _session([Enrollment(UserId.new(), 2, NOW) for _ in range(3)], capacity=3)
        assert session.is_full

    def test_enrollment_for_unknown_user(self):
        assert _session().enrollment_for(UserId.new()) is None
