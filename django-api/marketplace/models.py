"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class User(models.Model):
    """Persistence model for marketplace members."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(max_length=254, unique=True)
    full_name = models.CharField(max_length=255)
    bio = models.TextField(blank=True, default="")
    points = models.IntegerField(default=20)
    teachable_skills = models.JSONField(default=list, blank=True)
    learning_skills = models.JSONField(default=list, blank=True)
    sessions_hosted = models.PositiveIntegerField(default=0)
    sessions_attended = models.PositiveIntegerField(default=0)
    average_rating = models.PositiveSmallIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.username


class Session(models.Model):
    """Persistence model for learning sessions."""

    class Level(models.TextChoices):
        BEGINNER = "beginner"
        INTERMEDIATE = "intermediate"
        ADVANCED = "advanced"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    host = models.ForeignKey(User, on_delete=models.CASCADE, related_name="hosted_sessions")
    category = models.CharField(max_length=100)
    level = models.CharField(max_length=20, choices=Level.choices)
    max_participants = models.PositiveIntegerField()
    cost = models.IntegerField()
    starts_at = models.DateTimeField()
    duration = models.PositiveIntegerField()
    rating = models.PositiveSmallIntegerField(default=0)
    rating_count = models.PositiveIntegerField(default=0)
    is_completed = models.BooleanField(default=False)
    meeting_room_id = models.CharField(max_length=300, unique=True)
    meeting_started = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["host", "starts_at"], name="session_host_starts_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.starts_at}"


class Enrollment(models.Model):
    """Persistence model for a participant's seat in a session."""

    session = models.ForeignKey(Session, on_delete=models.CASCADE, related_name="enrollments")
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="enrollments")
    points_paid = models.IntegerField()
    joined_at = models.DateTimeField()

    class Meta:
        ordering = ["joined_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["session", "user"], name="unique_session_participant"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} in {self.session_id}"
