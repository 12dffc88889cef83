# trackee/services/attendance_aggregator.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List, Mapping, Tuple

from trackee.core.config import get_settings
from trackee.schemas.attendance import (
    AttendanceAggregate,
    AttendanceSummaryRecord,
    SystemAnalytics,
    VerticalAverage,
)

_SUMMARY_KEYS = ("attendanceSummary", "attendance_summary")


def _round_half_up(value: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def _as_record(raw: AttendanceSummaryRecord | Mapping[str, Any]) -> AttendanceSummaryRecord:
    if isinstance(raw, AttendanceSummaryRecord):
        return raw
    if isinstance(raw, Mapping):
        return AttendanceSummaryRecord.model_validate(dict(raw))
    # Anything else is an unusable row: no roll number, vertical or percentage.
    return AttendanceSummaryRecord()


def normalize_attendance_summary(payload: Any) -> Tuple[List[AttendanceSummaryRecord], bool]:
    """
    Extract attendance summary records from a backend response.

    Accepted shapes
    ---------------
    - {"attendanceSummary": [...]}
    - {"attendance_summary": [...]}
    - a bare list

    Returns the records plus a flag telling whether the shape was
    recognized. Unrecognized shapes yield no records.
    """
    rows: Any = None
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in _SUMMARY_KEYS:
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break

    if rows is None:
        return [], False

    records = [_as_record(row) for row in rows if isinstance(row, (Mapping, AttendanceSummaryRecord))]
    return records, True


def aggregate(
    records: Iterable[AttendanceSummaryRecord | Mapping[str, Any]],
    *,
    unknown_vertical_label: str | None = None,
) -> AttendanceAggregate:
    """
    Roll attendance summary records up into per-vertical averages and
    system-wide analytics.

    Rules
    -----
    - Records without a vertical are grouped under `unknown_vertical_label`
      ("N/A" by default) instead of being dropped.
    - A vertical's average is the mean of its numeric percentages rounded to
      the nearest integer (halves round up), or 0 when it has none.
    - Verticals are reported in order of first appearance.
    - total_members counts distinct roll numbers across all records.
    - total_verticals counts distinct vertical labels, sentinel included.
    - avg_attendance is the mean of every numeric percentage rounded to one
      decimal, or 0 when there is none.

    The input is only read. The same input always yields the same output.
    """
    if unknown_vertical_label is None:
        unknown_vertical_label = get_settings().UNKNOWN_VERTICAL_LABEL

    # vertical -> (sum of numeric percentages, count of numeric percentages)
    groups: dict[str, list[float]] = {}
    roll_numbers: set[str] = set()
    total = 0.0
    counted = 0

    for raw in records:
        record = _as_record(raw)

        vertical = record.vertical
        if not vertical or not vertical.strip():
            vertical = unknown_vertical_label
        bucket = groups.setdefault(vertical, [0.0, 0])

        if record.roll_no:
            roll_numbers.add(record.roll_no)

        if record.percentage is not None:
            bucket[0] += record.percentage
            bucket[1] += 1
            total += record.percentage
            counted += 1

    vertical_averages = [
        VerticalAverage(
            vertical=vertical,
            percentage=int(_round_half_up(pct_sum / count)) if count else 0,
        )
        for vertical, (pct_sum, count) in groups.items()
    ]

    avg_attendance = float(_round_half_up(total / counted, 1)) if counted else 0.0

    return AttendanceAggregate(
        vertical_averages=vertical_averages,
        analytics=SystemAnalytics(
            total_verticals=len(groups),
            total_members=len(roll_numbers),
            avg_attendance=avg_attendance,
        ),
    )
