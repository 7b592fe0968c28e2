"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from marketplace.container import get_container
from marketplace.domain import Capacity, EnrollmentOutcome, EnrollmentResult, Level, NewSession, NewUser
from marketplace.domain.errors import SessionNotFoundError, UserNotFoundError
from marketplace.handlers.serializers import (
    EnrollmentRequestSerializer,
    MeetingRoomSerializer,
    SessionSerializer,
    SessionWriteSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from marketplace.services import parse_session_id, parse_user_id

_NOT_FOUND_OUTCOMES = {EnrollmentOutcome.SESSION_NOT_FOUND, EnrollmentOutcome.USER_NOT_FOUND}


def _sessions_response(sessions, with_hosts: bool = False) -> Response:
    context = {}
    if with_hosts:
        context["hosts"] = get_container().service.hosts_for(sessions)
    return Response(SessionSerializer(sessions, many=True, context=context).data)


def _enrollment_response(result: EnrollmentResult, success_message: str) -> Response:
    if result.ok:
        return Response(
            {
                "message": success_message,
                "session": SessionSerializer(result.session).data,
                "user": UserSerializer(result.user).data,
            }
        )
    if result.outcome in _NOT_FOUND_OUTCOMES:
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response({"code": result.outcome.value, "message": result.message}, status=code)


class CurrentUserView(APIView):
    """Handler for GET /api/users/current"""

    def get(self, request: Request) -> Response:
        user = get_container().service.current_user()
        return Response(UserSerializer(user).data)


class UserListView(APIView):
    """Handler for GET/POST /api/users"""

    def get(self, request: Request) -> Response:
        users = get_container().service.list_users()
        return Response(UserSerializer(users, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        user = get_container().service.register_user(
            NewUser(
                username=data["username"],
                email=data["email"],
                full_name=data["full_name"],
                bio=data["bio"],
                points=data.get("points"),
                teachable_skills=tuple(data["teachable_skills"]),
                learning_skills=tuple(data["learning_skills"]),
            )
        )
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """Handler for GET/PATCH/PUT /api/users/{user_id}"""

    def get(self, request: Request, user_id: str) -> Response:
        user = get_container().service.get_user(user_id)
        return Response(UserSerializer(user).data)

    def patch(self, request: Request, user_id: str) -> Response:
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        service = get_container().service

        user = service.update_profile(
            user_id,
            full_name=data.get("full_name"),
            bio=data.get("bio"),
            username=data.get("username"),
            email=data.get("email"),
        )
        if "teachable_skills" in data or "learning_skills" in data:
            user = service.set_skills(
                user_id,
                teachable=data.get("teachable_skills"),
                learning=data.get("learning_skills"),
            )
        if "points" in data:
            user = service.set_points(user_id, data["points"])
        return Response(UserSerializer(user).data)

    put = patch


class HostedSessionsView(APIView):
    """Handler for GET /api/users/{user_id}/sessions/hosted"""

    def get(self, request: Request, user_id: str) -> Response:
        return _sessions_response(get_container().service.sessions_hosted_by(user_id))


class AttendedSessionsView(APIView):
    """Handler for GET /api/users/{user_id}/sessions/attended"""

    def get(self, request: Request, user_id: str) -> Response:
        return _sessions_response(get_container().service.sessions_attended_by(user_id))


class SessionListView(APIView):
    """Handler for GET/POST /api/sessions"""

    def get(self, request: Request) -> Response:
        return _sessions_response(get_container().service.list_sessions(), with_hosts=True)

    def post(self, request: Request) -> Response:
        serializer = SessionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        container = get_container()

        if "host_id" in data:
            host_id = parse_user_id(data["host_id"])
        else:
            host_id = container.service.current_user().id

        session = container.ledger.create_session(
            host_id,
            NewSession(
                title=data["title"],
                description=data["description"],
                host_id=host_id,
                category=data["category"],
                level=Level(data["level"]),
                max_participants=Capacity(data["max_participants"]),
                cost=data["cost"],
                starts_at=data["starts_at"],
                duration=data["duration"],
            ),
        )
        if session is None:
            raise UserNotFoundError(str(host_id))
        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)


class SessionDetailView(APIView):
    """Handler for GET/PATCH /api/sessions/{session_id}"""

    def get(self, request: Request, session_id: str) -> Response:
        service = get_container().service
        session = service.get_session(session_id)
        hosts = service.hosts_for([session])
        return Response(SessionSerializer(session, context={"hosts": hosts}).data)

    def patch(self, request: Request, session_id: str) -> Response:
        serializer = SessionWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        session = get_container().ledger.update_session_details(
            parse_session_id(session_id),
            title=data.get("title"),
            description=data.get("description"),
            category=data.get("category"),
            level=Level(data["level"]) if "level" in data else None,
            max_participants=(
                Capacity(data["max_participants"]) if "max_participants" in data else None
            ),
            cost=data.get("cost"),
            starts_at=data.get("starts_at"),
            duration=data.get("duration"),
        )
        if session is None:
            raise SessionNotFoundError(session_id)
        return Response(SessionSerializer(session).data)


class JoinSessionView(APIView):
    """Handler for POST /api/sessions/{session_id}/join"""

    def post(self, request: Request, session_id: str) -> Response:
        serializer = EnrollmentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = get_container().ledger.join_session(
            parse_session_id(session_id),
            parse_user_id(serializer.validated_data["user_id"]),
        )
        return _enrollment_response(result, "Successfully joined session")


class LeaveSessionView(APIView):
    """Handler for POST /api/sessions/{session_id}/leave"""

    def post(self, request: Request, session_id: str) -> Response:
        serializer = EnrollmentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = get_container().ledger.leave_session(
            parse_session_id(session_id),
            parse_user_id(serializer.validated_data["user_id"]),
        )
        return _enrollment_response(result, "Successfully left session")


class StartMeetingView(APIView):
    """Handler for POST /api/sessions/{session_id}/start-meeting"""

    def post(self, request: Request, session_id: str) -> Response:
        session = get_container().gate.start_meeting(parse_session_id(session_id))
        if session is None:
            raise SessionNotFoundError(session_id)
        return Response(
            {
                "message": "Meeting started successfully",
                "meetingRoomId": session.meeting_room_id,
                "meetingStarted": session.meeting_started,
            }
        )


class EndMeetingView(APIView):
    """Handler for POST /api/sessions/{session_id}/end-meeting"""

    def post(self, request: Request, session_id: str) -> Response:
        session = get_container().gate.end_meeting(parse_session_id(session_id))
        if session is None:
            raise SessionNotFoundError(session_id)
        return Response(
            {
                "message": "Meeting ended",
                "meetingRoomId": session.meeting_room_id,
                "isCompleted": session.is_completed,
            }
        )


class MeetingRoomView(APIView):
    """Handler for GET /api/sessions/{session_id}/meeting-room

    Only the current user's own access is checked.
    """

    def get(self, request: Request, session_id: str) -> Response:
        service = get_container().service
        room = service.meeting_room_for(session_id, service.current_user())
        return Response(MeetingRoomSerializer(room).data)
