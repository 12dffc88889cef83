# trackee/schemas/dashboard.py
from pydantic import BaseModel, Field

from trackee.schemas.attendance import SystemAnalytics, VerticalAverage
from trackee.schemas.lead import LeadRecord, RosterAnalytics


class DashboardSnapshot(BaseModel):
    """
    Everything the global admin dashboard renders, recomputed on every load.

    `attendance_analytics` and `roster_analytics` come from two different
    backend listings and are reported side by side without reconciliation.
    """

    vertical_averages: list[VerticalAverage] = Field(default_factory=list)
    attendance_analytics: SystemAnalytics
    roster_analytics: RosterAnalytics
    leads: list[LeadRecord] = Field(default_factory=list)
    roster_shape_recognized: bool = Field(
        False,
        description="False when the roster response matched none of the accepted shapes.",
    )
    summary_shape_recognized: bool = Field(
        False,
        description="False when the attendance summary response had an unexpected shape.",
    )
