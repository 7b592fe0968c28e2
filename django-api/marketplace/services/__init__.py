from marketplace.services.enrollment_ledger import EnrollmentLedger
from marketplace.services.marketplace_service import (
    MarketplaceService,
    parse_session_id,
    parse_user_id,
)
from marketplace.services.meeting_gate import MeetingRoomGate

__all__ = [
    "EnrollmentLedger",
    "MarketplaceService",
    "MeetingRoomGate",
    "parse_session_id",
    "parse_user_id",
]
