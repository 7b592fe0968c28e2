"""Domain error codes for the marketplace module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    USERNAME_TAKEN = "USERNAME_TAKEN"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    MEETING_ACCESS_DENIED = "MEETING_ACCESS_DENIED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UserNotFoundError(DomainError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id


class SessionNotFoundError(DomainError):
    """Raised when a session is not found."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class InvalidIdError(DomainError):
    """Raised when a user or session ID is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid ID format",
        )


class UsernameTakenError(DomainError):
    """Raised when another user already has the username."""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.USERNAME_TAKEN,
            message="Username is already taken",
        )
        self.username = username


class EmailTakenError(DomainError):
    """Raised when another user already has the email address."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_TAKEN,
            message="Email is already registered",
        )
        self.email = email


class MeetingAccessDeniedError(DomainError):
    """Raised when a user is neither host nor participant of a session."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.MEETING_ACCESS_DENIED,
            message="Only the host and participants can join this meeting",
        )
        self.session_id = session_id
