# trackee/schemas/attendance.py
import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _coerce_label(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return str(value)
    return None


class AttendanceSummaryRecord(BaseModel):
    """
    One member's computed attendance percentage for a vertical, as produced
    by the backend reporting endpoint.

    Every field is optional: malformed entries are coerced rather than
    rejected so a single bad row cannot break the dashboard.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    roll_no: str | None = Field(
        None,
        validation_alias=AliasChoices("roll_no", "rollNo"),
        description="Roll number of the member.",
        examples=["21CS042"],
    )
    vertical: str | None = Field(
        None,
        description="Vertical the attendance was recorded for.",
        examples=["Web"],
    )
    percentage: float | None = Field(
        None,
        description="Attendance percentage (0-100). None when the value was not numeric.",
        examples=[82.5],
    )

    @field_validator("roll_no", "vertical", mode="before")
    @classmethod
    def _labels(cls, value: Any) -> str | None:
        return _coerce_label(value)

    @field_validator("percentage", mode="before")
    @classmethod
    def _numeric_only(cls, value: Any) -> float | None:
        # Only real numbers count; "80", True and NaN are all non-numeric.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if not math.isfinite(value):
            return None
        return float(value)


class VerticalAverage(BaseModel):
    """
    Rounded average attendance for one vertical.
    """

    vertical: str = Field(..., description="Vertical label.", examples=["Web"])
    percentage: int = Field(
        ...,
        description="Mean attendance of the vertical rounded to the nearest integer.",
        examples=[70],
    )


class SystemAnalytics(BaseModel):
    """
    System-wide totals derived from attendance summary records.
    """

    total_verticals: int = Field(
        ...,
        description="Number of distinct vertical labels present in the records.",
        examples=[2],
    )
    total_members: int = Field(
        ...,
        description="Number of distinct roll numbers across all records.",
        examples=[3],
    )
    avg_attendance: float = Field(
        ...,
        description="Mean attendance over all numeric percentages, rounded to 1 decimal.",
        examples=[76.7],
    )


class AttendanceAggregate(BaseModel):
    """
    Result of aggregating a collection of attendance summary records.
    """

    vertical_averages: list[VerticalAverage] = Field(
        ...,
        description="One entry per vertical, in order of first appearance.",
    )
    analytics: SystemAnalytics
