import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=150, unique=True)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("full_name", models.CharField(max_length=255)),
                ("bio", models.TextField(blank=True, default="")),
                ("points", models.IntegerField(default=20)),
                ("teachable_skills", models.JSONField(blank=True, default=list)),
                ("learning_skills", models.JSONField(blank=True, default=list)),
                ("sessions_hosted", models.PositiveIntegerField(default=0)),
                ("sessions_attended", models.PositiveIntegerField(default=0)),
                ("average_rating", models.PositiveSmallIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="Session",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("category", models.CharField(max_length=100)),
                (
                    "level",
                    models.CharField(
                        choices=[
                            ("beginner", "Beginner"),
                            ("intermediate", "Intermediate"),
                            ("advanced", "Advanced"),
                        ],
                        max_length=20,
                    ),
                ),
                ("max_participants", models.PositiveIntegerField()),
                ("cost", models.IntegerField()),
                ("starts_at", models.DateTimeField()),
                ("duration", models.PositiveIntegerField()),
                ("rating", models.PositiveSmallIntegerField(default=0)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("is_completed", models.BooleanField(default=False)),
                ("meeting_room_id", models.CharField(max_length=300, unique=True)),
                ("meeting_started", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "host",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="hosted_sessions",
                        to="marketplace.user",
                    ),
                ),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [models.Index(fields=["host", "starts_at"], name="session_host_starts_idx")],
            },
        ),
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("points_paid", models.IntegerField()),
                ("joined_at", models.DateTimeField()),
                (
                    "session",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="marketplace.session",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="marketplace.user",
                    ),
                ),
            ],
            options={
                "ordering": ["joined_at", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("session", "user"), name="unique_session_participant")
                ],
            },
        ),
    ]
