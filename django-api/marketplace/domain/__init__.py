from marketplace.domain.models import (
    Enrollment,
    MeetingRoom,
    NewSession,
    NewUser,
    Session,
    User,
)
from marketplace.domain.outcomes import EnrollmentOutcome, EnrollmentResult
from marketplace.domain.value_objects import Capacity, Level, Rating, SessionId, UserId

__all__ = [
    "User",
    "Session",
    "Enrollment",
    "NewUser",
    "NewSession",
    "MeetingRoom",
    "EnrollmentOutcome",
    "EnrollmentResult",
    "UserId",
    "SessionId",
    "Capacity",
    "Rating",
    "Level",
]
