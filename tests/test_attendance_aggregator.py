# tests/test_attendance_aggregator.py
import copy

from trackee.schemas.attendance import AttendanceSummaryRecord
from trackee.services.attendance_aggregator import aggregate, normalize_attendance_summary


def test_aggregate_groups_by_vertical_and_computes_analytics():
    """
    Two verticals, three members: averages per vertical are rounded integers
    and the overall average is rounded to one decimal.
    """
    records = [
        {"rollNo": "A", "vertical": "X", "percentage": 80},
        {"rollNo": "B", "vertical": "X", "percentage": 60},
        {"rollNo": "C", "vertical": "Y", "percentage": 90},
    ]

    result = aggregate(records)

    assert [(v.vertical, v.percentage) for v in result.vertical_averages] == [
        ("X", 70),
        ("Y", 90),
    ]
    assert result.analytics.total_verticals == 2
    assert result.analytics.total_members == 3
    assert result.analytics.avg_attendance == 76.7


def test_aggregate_empty_input_is_all_zero():
    result = aggregate([])

    assert result.vertical_averages == []
    assert result.analytics.total_verticals == 0
    assert result.analytics.total_members == 0
    assert result.analytics.avg_attendance == 0


def test_avg_attendance_is_plain_mean():
    result = aggregate(
        [
            {"roll_no": "A", "vertical": "X", "percentage": 100},
            {"roll_no": "B", "vertical": "X", "percentage": 50},
        ]
    )
    assert result.analytics.avg_attendance == 75.0


def test_duplicate_roll_numbers_across_verticals_count_once():
    records = [
        {"roll_no": "A", "vertical": "X", "percentage": 80},
        {"roll_no": "A", "vertical": "Y", "percentage": 40},
        {"roll_no": "B", "vertical": "Y", "percentage": 60},
    ]

    result = aggregate(records)

    assert result.analytics.total_members == 2
    assert result.analytics.total_verticals == 2


def test_missing_vertical_is_grouped_under_sentinel():
    """
    Missing, empty and whitespace-only verticals all land in the "N/A" group,
    which also counts towards total_verticals.
    """
    records = [
        {"roll_no": "A", "percentage": 50},
        {"roll_no": "B", "vertical": "", "percentage": 70},
        {"roll_no": "C", "vertical": "  ", "percentage": 90},
        {"roll_no": "D", "vertical": "Web", "percentage": 100},
    ]

    result = aggregate(records, unknown_vertical_label="N/A")

    by_vertical = {v.vertical: v.percentage for v in result.vertical_averages}
    assert by_vertical == {"N/A": 70, "Web": 100}
    assert result.analytics.total_verticals == 2


def test_non_blank_vertical_labels_are_kept_verbatim():
    """
    Only blank labels fall back to the sentinel; padded labels form their
    own group.
    """
    records = [
        {"roll_no": "A", "vertical": "Web", "percentage": 60},
        {"roll_no": "B", "vertical": " Web", "percentage": 80},
    ]

    result = aggregate(records, unknown_vertical_label="N/A")

    assert [(v.vertical, v.percentage) for v in result.vertical_averages] == [
        ("Web", 60),
        (" Web", 80),
    ]
    assert result.analytics.total_verticals == 2


def test_group_without_numeric_percentages_averages_zero():
    """
    Non-numeric percentages are excluded from the mean, but the member still
    counts and the vertical still appears.
    """
    records = [
        {"roll_no": "A", "vertical": "X", "percentage": "80"},
        {"roll_no": "B", "vertical": "X"},
        {"roll_no": "C", "vertical": "Y", "percentage": 40},
        {"roll_no": "D", "vertical": "Y", "percentage": None},
    ]

    result = aggregate(records)

    by_vertical = {v.vertical: v.percentage for v in result.vertical_averages}
    assert by_vertical == {"X": 0, "Y": 40}
    assert result.analytics.total_members == 4
    # Only the single numeric value contributes to the overall mean.
    assert result.analytics.avg_attendance == 40.0


def test_vertical_order_follows_first_appearance():
    records = [
        {"roll_no": "1", "vertical": "Zeta", "percentage": 10},
        {"roll_no": "2", "vertical": "Alpha", "percentage": 20},
        {"roll_no": "3", "vertical": "Zeta", "percentage": 30},
        {"roll_no": "4", "vertical": "Mid", "percentage": 40},
    ]

    result = aggregate(records)

    assert [v.vertical for v in result.vertical_averages] == ["Zeta", "Alpha", "Mid"]


def test_half_values_round_up():
    records = [
        {"roll_no": "A", "vertical": "X", "percentage": 70},
        {"roll_no": "B", "vertical": "X", "percentage": 71},
    ]

    result = aggregate(records)

    assert result.vertical_averages[0].percentage == 71
    assert result.analytics.avg_attendance == 70.5


def test_aggregate_is_deterministic_and_does_not_mutate_input():
    records = [
        {"roll_no": "A", "vertical": "X", "percentage": 80},
        AttendanceSummaryRecord(roll_no="B", vertical="Y", percentage=33.3),
        {"roll_no": "C", "percentage": True},
    ]
    before = copy.deepcopy(records)

    first = aggregate(records)
    second = aggregate(records)

    assert first == second
    assert records == before


def test_boolean_and_non_finite_percentages_are_not_numeric():
    records = [
        {"roll_no": "A", "vertical": "X", "percentage": True},
        {"roll_no": "B", "vertical": "X", "percentage": float("nan")},
        {"roll_no": "C", "vertical": "X", "percentage": 90},
    ]

    result = aggregate(records)

    assert result.vertical_averages[0].percentage == 90
    assert result.analytics.avg_attendance == 90.0


def test_normalize_attendance_summary_shapes():
    rows = [{"roll_no": "A", "vertical": "X", "percentage": 80}]

    records, ok = normalize_attendance_summary({"attendanceSummary": rows})
    assert ok is True
    assert records[0].roll_no == "A"

    records, ok = normalize_attendance_summary(rows)
    assert ok is True
    assert len(records) == 1

    records, ok = normalize_attendance_summary({"summary": rows})
    assert ok is False
    assert records == []

    records, ok = normalize_attendance_summary(None)
    assert ok is False
    assert records == []
