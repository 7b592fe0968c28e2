"""Django ORM implementation of the MarketplaceStore."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from django.db import transaction
from django.db.models import Prefetch, QuerySet

from marketplace import models
from marketplace.domain import (
    Capacity,
    Enrollment,
    Level,
    NewSession,
    NewUser,
    Rating,
    Session,
    SessionId,
    User,
    UserId,
)
from marketplace.domain.models import DEFAULT_STARTING_POINTS
from marketplace.domain.value_objects import meeting_room_id_for
from marketplace.stores.interfaces import MarketplaceStore


def _to_user(row: models.User) -> User:
    return User(
        id=UserId(row.id),
        username=row.username,
        email=row.email,
        full_name=row.full_name,
        bio=row.bio,
        points=row.points,
        teachable_skills=tuple(row.teachable_skills),
        learning_skills=tuple(row.learning_skills),
        sessions_hosted=row.sessions_hosted,
        sessions_attended=row.sessions_attended,
        average_rating=Rating(row.average_rating),
        created_at=row.created_at,
    )


def _to_session(row: models.Session) -> Session:
    return Session(
        id=SessionId(row.id),
        title=row.title,
        description=row.description,
        host_id=UserId(row.host_id),
        category=row.category,
        level=Level(row.level),
        max_participants=Capacity(row.max_participants),
        cost=row.cost,
        starts_at=row.starts_at,
        duration=row.duration,
        meeting_room_id=row.meeting_room_id,
        created_at=row.created_at,
        enrollments=tuple(
            Enrollment(
                user_id=UserId(e.user_id),
                points_paid=e.points_paid,
                joined_at=e.joined_at,
            )
            for e in row.enrollments.all()
        ),
        rating=Rating(row.rating),
        rating_count=row.rating_count,
        is_completed=row.is_completed,
        meeting_started=row.meeting_started,
    )


def _user_columns(fields: dict[str, Any]) -> dict[str, Any]:
    columns = dict(fields)
    for name in ("teachable_skills", "learning_skills"):
        if name in columns:
            columns[name] = list(columns[name])
    if "average_rating" in columns:
        columns["average_rating"] = columns["average_rating"].value
    return columns


def _session_columns(fields: dict[str, Any]) -> dict[str, Any]:
    columns = dict(fields)
    if "host_id" in columns:
        columns["host_id"] = columns["host_id"].value
    for name in ("level", "max_participants", "rating"):
        if name in columns:
            columns[name] = columns[name].value
    return columns


class DjangoMarketplaceStore(MarketplaceStore):
    """Database-backed store using Django ORM.

    Reads made inside ``transaction()`` lock the selected rows where the
    database supports ``SELECT ... FOR UPDATE``.
    """

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with transaction.atomic():
            yield

    def _users(self) -> QuerySet[models.User]:
        queryset = models.User.objects.all()
        if transaction.get_connection().in_atomic_block:
            queryset = queryset.select_for_update()
        return queryset

    def _sessions(self) -> QuerySet[models.Session]:
        queryset = models.Session.objects.prefetch_related(
            Prefetch("enrollments", queryset=models.Enrollment.objects.order_by("joined_at", "id"))
        )
        if transaction.get_connection().in_atomic_block:
            queryset = queryset.select_for_update()
        return queryset

    def get_user(self, user_id: UserId) -> User | None:
        row = self._users().filter(pk=user_id.value).first()
        return _to_user(row) if row else None

    def get_user_by_username(self, username: str) -> User | None:
        row = self._users().filter(username=username).first()
        return _to_user(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        row = self._users().filter(email=email).first()
        return _to_user(row) if row else None

    def list_users(self) -> list[User]:
        return [_to_user(row) for row in models.User.objects.order_by("created_at")]

    def create_user(self, data: NewUser) -> User:
        row = models.User.objects.create(
            id=UserId.new().value,
            username=data.username,
            email=data.email,
            full_name=data.full_name,
            bio=data.bio or "",
            points=DEFAULT_STARTING_POINTS if data.points is None else data.points,
            teachable_skills=list(data.teachable_skills),
            learning_skills=list(data.learning_skills),
        )
        return _to_user(row)

    def update_user(self, user_id: UserId, **fields: Any) -> User | None:
        if fields:
            models.User.objects.filter(pk=user_id.value).update(**_user_columns(fields))
        return self.get_user(user_id)

    def get_session(self, session_id: SessionId) -> Session | None:
        row = self._sessions().filter(pk=session_id.value).first()
        return _to_session(row) if row else None

    def list_sessions(self) -> list[Session]:
        return [_to_session(row) for row in self._sessions().order_by("starts_at")]

    def get_sessions_by_host(self, host_id: UserId) -> list[Session]:
        return [_to_session(row) for row in self._sessions().filter(host_id=host_id.value)]

    def get_sessions_by_participant(self, user_id: UserId) -> list[Session]:
        enrolled = models.Enrollment.objects.filter(user_id=user_id.value).values("session_id")
        rows = self._sessions().filter(pk__in=enrolled)
        return [_to_session(row) for row in rows]

    def create_session(self, data: NewSession) -> Session:
        session_id = SessionId.new()
        models.Session.objects.create(
            id=session_id.value,
            title=data.title,
            description=data.description,
            host_id=data.host_id.value,
            category=data.category,
            level=data.level.value,
            max_participants=data.max_participants.value,
            cost=data.cost,
            starts_at=data.starts_at,
            duration=data.duration,
            meeting_room_id=meeting_room_id_for(session_id, data.title),
        )
        return self.get_session(session_id)

    def update_session(self, session_id: SessionId, **fields: Any) -> Session | None:
        if fields:
            models.Session.objects.filter(pk=session_id.value).update(**_session_columns(fields))
        return self.get_session(session_id)

    def add_enrollment(self, session_id: SessionId, enrollment: Enrollment) -> Session | None:
        if not models.Session.objects.filter(pk=session_id.value).exists():
            return None
        models.Enrollment.objects.create(
            session_id=session_id.value,
            user_id=enrollment.user_id.value,
            points_paid=enrollment.points_paid,
            joined_at=enrollment.joined_at,
        )
        return self.get_session(session_id)

    def remove_enrollment(self, session_id: SessionId, user_id: UserId) -> Session | None:
        if not models.Session.objects.filter(pk=session_id.value).exists():
            return None
        models.Enrollment.objects.filter(
            session_id=session_id.value, user_id=user_id.value
        ).delete()
        return self.get_session(session_id)
