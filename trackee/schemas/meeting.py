# trackee/schemas/meeting.py
from datetime import datetime

from pydantic import BaseModel, Field


class MeetingCreate(BaseModel):
    """
    Form data for scheduling a vertical meeting.

    Validation rules (blank fields, past dates) live in the meeting service
    so the dashboard can report the same messages the form shows.
    """

    meeting_name: str = Field("", description="Meeting title.", examples=["Weekly sync"])
    date: datetime | None = Field(
        None,
        description="Scheduled date and time of the meeting.",
        examples=["2026-11-02T17:30:00"],
    )
    m_o_m: str = Field(
        "",
        description="Agenda / minutes of meeting.",
        examples=["Sprint review and task allocation"],
    )
