"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in marketplace/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime

from marketplace.domain.value_objects import Capacity, Level, Rating, SessionId, UserId

DEFAULT_STARTING_POINTS = 20


@dataclass(frozen=True)
class User:
    """Domain representation of a marketplace member."""

    id: UserId
    username: str
    email: str
    full_name: str
    bio: str
    points: int
    teachable_skills: tuple[str, ...]
    learning_skills: tuple[str, ...]
    sessions_hosted: int
    sessions_attended: int
    average_rating: Rating
    created_at: datetime


@dataclass(frozen=True)
class Enrollment:
    """A user's seat in a session and the points charged for it."""

    user_id: UserId
    points_paid: int
    joined_at: datetime


@dataclass(frozen=True)
class Session:
    """Domain representation of a hosted learning session."""

    id: SessionId
    title: str
    description: str
    host_id: UserId
    category: str
    level: Level
    max_participants: Capacity
    cost: int
    starts_at: datetime
    duration: int
    meeting_room_id: str
    created_at: datetime
    enrollments: tuple[Enrollment, ...] = ()
    rating: Rating = field(default_factory=Rating)
    rating_count: int = 0
    is_completed: bool = False
    meeting_started: bool = False

    @property
    def participants(self) -> tuple[UserId, ...]:
        return tuple(enrollment.user_id for enrollment in self.enrollments)

    @property
    def current_participants(self) -> int:
        return len(self.enrollments)

    @property
    def is_full(self) -> bool:
        return self.current_participants >= self.max_participants.value

    def has_participant(self, user_id: UserId) -> bool:
        return self.enrollment_for(user_id) is not None

    def enrollment_for(self, user_id: UserId) -> Enrollment | None:
        for enrollment in self.enrollments:
            if enrollment.user_id == user_id:
                return enrollment
        return None


@dataclass(frozen=True)
class NewUser:
    """Fields accepted when registering a user."""

    username: str
    email: str
    full_name: str
    bio: str = ""
    points: int | None = None
    teachable_skills: tuple[str, ...] = ()
    learning_skills: tuple[str, ...] = ()


@dataclass(frozen=True)
class NewSession:
    """Fields accepted when a host schedules a session."""

    title: str
    description: str
    host_id: UserId
    category: str
    level: Level
    max_participants: Capacity
    cost: int
    starts_at: datetime
    duration: int


@dataclass(frozen=True)
class MeetingRoom:
    """Video-call access context for a session."""

    session_id: SessionId
    meeting_room_id: str
    meeting_started: bool
    is_completed: bool
    session_title: str
    host_id: UserId
    participants: tuple[UserId, ...]
