from marketplace.handlers.views import (
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

__all__ = [
    "AttendedSessionsView",
    "CurrentUserView",
    "EndMeetingView",
    "HostedSessionsView",
    "JoinSessionView",
    "LeaveSessionView",
    "MeetingRoomView",
    "SessionDetailView",
    "SessionListView",
    "StartMeetingView",
    "UserDetailView",
    "UserListView",
]
