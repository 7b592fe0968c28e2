"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class Rating:
    """Rating stored as a fixed-point integer with one decimal place (4.8 -> 48)."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 50:
            raise ValueError("Rating must be between 0 and 50")


class Level(Enum):
    """Difficulty level of a session."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


_ROOM_SLUG_PATTERN = re.compile(r"[^a-z0-9]")


def meeting_room_id_for(session_id: SessionId, title: str) -> str:
    """Derive the video-call room key from a session id and its title.

    The first group of the UUID is combined with the lowercased title, every
    character outside ``[a-z0-9]`` replaced by a dash.
    """
    prefix = str(session_id.value).split("-")[0]
    slug = _ROOM_SLUG_PATTERN.sub("-", title.lower())
    return f"room-{prefix}-{slug}"
