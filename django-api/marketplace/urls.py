from django.urls import path

from marketplace.handlers import (
    AttendedSessionsView,
    CurrentUserView,
    EndMeetingView,
    HostedSessionsView,
    JoinSessionView,
    LeaveSessionView,
    MeetingRoomView,
    SessionDetailView,
    SessionListView,
    StartMeetingView,
    UserDetailView,
    UserListView,
)

urlpatterns = [
    # "current" must come before the parameterized user routes
    path("users/current", CurrentUserView.as_view(), name="user-current"),
    path("users", UserListView.as_view(), name="user-list"),
    path("users/<str:user_id>", UserDetailView.as_view(), name="user-detail"),
    path(
        "users/<str:user_id>/sessions/hosted",
        HostedSessionsView.as_view(),
        name="user-sessions-hosted",
    ),
    path(
        "users/<str:user_id>/sessions/attended",
        AttendedSessionsView.as_view(),
        name="user-sessions-attended",
    ),
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("sessions/<str:session_id>", SessionDetailView.as_view(), name="session-detail"),
    path("sessions/<str:session_id>/join", JoinSessionView.as_view(), name="session-join"),
    path("sessions/<str:session_id>/leave", LeaveSessionView.as_view(), name="session-leave"),
    path(
        "sessions/<str:session_id>/start-meeting",
        StartMeetingView.as_view(),
        name="session-start-meeting",
    ),
    path(
        "sessions/<str:session_id>/end-meeting",
        EndMeetingView.as_view(),
        name="session-end-meeting",
    ),
    path(
        "sessions/<str:session_id>/meeting-room",
        MeetingRoomView.as_view(),
        name="session-meeting-room",
    ),
]
