# trackee/services/meetings.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from trackee.schemas.meeting import MeetingCreate
from trackee.schemas.results import ActionResult
from trackee.services.api_client import ApiClientError, TrackeeApiClient

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def validate_meeting(data: MeetingCreate, now: Optional[datetime] = None) -> Optional[str]:
    """
    Return the first validation error for the meeting form, or None.

    Rules, checked in order
    -----------------------
    1) meeting_name must not be blank
    2) date must be set
    3) m_o_m (agenda) must not be blank
    4) date must not be in the past

    Naive datetimes are treated as UTC.
    """
    if not data.meeting_name.strip():
        return "Meeting name is required"
    if data.date is None:
        return "Date and time are required"
    if not data.m_o_m.strip():
        return "Meeting description/agenda is required"

    if now is None:
        now = datetime.now(tz=timezone.utc)
    if _as_utc(data.date) < _as_utc(now):
        return "Please select a future date and time"
    return None


class MeetingService:
    """
    Schedules meetings for the signed-in lead's vertical.
    """

    def __init__(self, api_client: TrackeeApiClient) -> None:
        self.api = api_client

    async def create_meeting(
        self,
        data: MeetingCreate,
        now: Optional[datetime] = None,
    ) -> ActionResult:
        error = validate_meeting(data, now)
        if error:
            return ActionResult(ok=False, message=error)

        try:
            response = await self.api.create_meeting(data.model_dump(mode="json"))
        except ApiClientError as exc:
            logger.warning("Creating meeting %r failed: %s", data.meeting_name, exc)
            return ActionResult(
                ok=False,
                message=exc.server_message or "Failed to create meeting. Please try again.",
            )

        # The backend confirms with both a message and the stored meeting.
        if isinstance(response, dict) and response.get("message") and response.get("meeting"):
            return ActionResult(ok=True, message=response["message"], data=response["meeting"])
        return ActionResult(ok=False, message="Failed to create meeting")
