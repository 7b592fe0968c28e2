"""Serializers for transforming domain models to API responses and parsing input.

Keys are camelCase to match the web client.
"""

from rest_framework import serializers

from marketplace.domain import Level


class HostSummarySerializer(serializers.Serializer):
    """Compact host details embedded in session responses."""

    id = serializers.CharField()
    fullName = serializers.CharField(source="full_name")
    username = serializers.CharField()
    averageRating = serializers.IntegerField(source="average_rating.value")


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = serializers.CharField()
    username = serializers.CharField()
    email = serializers.CharField()
    fullName = serializers.CharField(source="full_name")
    bio = serializers.CharField()
    points = serializers.IntegerField()
    teachableSkills = serializers.ListField(child=serializers.CharField(), source="teachable_skills")
    learningSkills = serializers.ListField(child=serializers.CharField(), source="learning_skills")
    sessionsHosted = serializers.IntegerField(source="sessions_hosted")
    sessionsAttended = serializers.IntegerField(source="sessions_attended")
    averageRating = serializers.IntegerField(source="average_rating.value")
    createdAt = serializers.DateTimeField(source="created_at")


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model.

    Pass ``context={"hosts": {...}}`` to embed a host summary.
    """

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    hostId = serializers.CharField(source="host_id")
    category = serializers.CharField()
    level = serializers.CharField(source="level.value")
    maxParticipants = serializers.IntegerField(source="max_participants.value")
    currentParticipants = serializers.IntegerField(source="current_participants")
    cost = serializers.IntegerField()
    datetime = serializers.DateTimeField(source="starts_at")
    duration = serializers.IntegerField()
    participants = serializers.ListField(child=serializers.CharField())
    rating = serializers.IntegerField(source="rating.value")
    ratingCount = serializers.IntegerField(source="rating_count")
    isCompleted = serializers.BooleanField(source="is_completed")
    meetingRoomId = serializers.CharField(source="meeting_room_id")
    meetingStarted = serializers.BooleanField(source="meeting_started")
    createdAt = serializers.DateTimeField(source="created_at")

    def to_representation(self, instance):
        data = super().to_representation(instance)
        hosts = self.context.get("hosts")
        if hosts is not None:
            host = hosts.get(instance.host_id)
            data["host"] = HostSummarySerializer(host).data if host else None
        return data


class MeetingRoomSerializer(serializers.Serializer):
    """Serializer for MeetingRoom domain model."""

    meetingRoomId = serializers.CharField(source="meeting_room_id")
    meetingStarted = serializers.BooleanField(source="meeting_started")
    isCompleted = serializers.BooleanField(source="is_completed")
    sessionTitle = serializers.CharField(source="session_title")
    hostId = serializers.CharField(source="host_id")
    participants = serializers.ListField(child=serializers.CharField())


class UserCreateSerializer(serializers.Serializer):
    """Input for POST /api/users"""

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    fullName = serializers.CharField(source="full_name", max_length=255)
    bio = serializers.CharField(required=False, allow_blank=True, default="")
    points = serializers.IntegerField(required=False, min_value=0)
    teachableSkills = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        source="teachable_skills",
        required=False,
        default=list,
    )
    learningSkills = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        source="learning_skills",
        required=False,
        default=list,
    )


class UserUpdateSerializer(serializers.Serializer):
    """Input for PATCH and PUT /api/users/{id}. Every field is optional."""

    username = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(required=False)
    fullName = serializers.CharField(source="full_name", max_length=255, required=False)
    bio = serializers.CharField(required=False, allow_blank=True)
    points = serializers.IntegerField(required=False, min_value=0)
    teachableSkills = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        source="teachable_skills",
        required=False,
    )
    learningSkills = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        source="learning_skills",
        required=False,
    )


class SessionWriteSerializer(serializers.Serializer):
    """Input for POST /api/sessions and PATCH /api/sessions/{id}."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    hostId = serializers.CharField(source="host_id", required=False)
    category = serializers.CharField(max_length=100)
    level = serializers.ChoiceField(choices=[level.value for level in Level])
    maxParticipants = serializers.IntegerField(source="max_participants", min_value=1)
    cost = serializers.IntegerField(min_value=0)
    datetime = serializers.DateTimeField(source="starts_at")
    duration = serializers.IntegerField(min_value=1)


class EnrollmentRequestSerializer(serializers.Serializer):
    """Input for POST /api/sessions/{id}/join and /leave."""

    userId = serializers.CharField(
        source="user_id",
        error_messages={"required": "User ID is required", "blank": "User ID is required"},
    )
