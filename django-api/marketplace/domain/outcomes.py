"""Tagged results returned by enrollment operations.

Expected failures (capacity, balance, membership) are values, not exceptions.
"""

from dataclasses import dataclass
from enum import Enum

from marketplace.domain.models import Session, User


class EnrollmentOutcome(Enum):
    OK = "OK"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ALREADY_ENROLLED = "ALREADY_ENROLLED"
    SESSION_FULL = "SESSION_FULL"
    INSUFFICIENT_POINTS = "INSUFFICIENT_POINTS"
    NOT_ENROLLED = "NOT_ENROLLED"


_MESSAGES = {
    EnrollmentOutcome.OK: "OK",
    EnrollmentOutcome.SESSION_NOT_FOUND: "Session not found",
    EnrollmentOutcome.USER_NOT_FOUND: "User not found",
    EnrollmentOutcome.ALREADY_ENROLLED: "You have already joined this session",
    EnrollmentOutcome.SESSION_FULL: "This session is full",
    EnrollmentOutcome.INSUFFICIENT_POINTS: "Not enough points to join this session",
    EnrollmentOutcome.NOT_ENROLLED: "You are not a participant of this session",
}


@dataclass(frozen=True)
class EnrollmentResult:
    """Outcome of a join or leave, with the records as they stand afterwards."""

    outcome: EnrollmentOutcome
    session: Session | None = None
    user: User | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is EnrollmentOutcome.OK

    @property
    def message(self) -> str:
        return _MESSAGES[self.outcome]

    @classmethod
    def failed(
        cls,
        outcome: EnrollmentOutcome,
        session: Session | None = None,
        user: User | None = None,
    ) -> "EnrollmentResult":
        return cls(outcome=outcome, session=session, user=user)
