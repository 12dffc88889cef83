# trackee/schemas/results.py
from typing import Any

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """
    Outcome of a management action (lead, member or meeting operations).

    Failures are reported through `ok=False` plus a human-readable message
    rather than raised to the caller.
    """

    ok: bool = Field(..., description="Whether the backend accepted the action.")
    message: str | None = Field(
        None,
        description="Success message, or the server/fallback error message.",
        examples=["Member added successfully!"],
    )
    data: Any = Field(None, description="Optional payload (e.g. refreshed dashboard data).")
