# trackee/services/roster.py
from __future__ import annotations

from typing import Any, Iterable

from trackee.schemas.lead import LeadRecord, RosterAnalytics, RosterNormalization

# Checked in this order; the first key holding a list wins.
ROSTER_KEYS = ("vertical_leads", "verticalLeads", "data", "leads")


def normalize_roster_response(payload: Any) -> RosterNormalization:
    """
    Reduce a lead roster response to a flat list of LeadRecord.

    The backend has returned the roster under several field names over time.
    Only these shapes are accepted:

    - a bare list of leads
    - an object holding the list under one of ROSTER_KEYS

    Anything else yields an empty roster with shape_recognized=False.
    Entries that are not objects are skipped.
    """
    rows: Any = None
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in ROSTER_KEYS:
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break

    if rows is None:
        return RosterNormalization(leads=[], shape_recognized=False)

    leads = [LeadRecord.model_validate(row) for row in rows if isinstance(row, dict)]
    return RosterNormalization(leads=leads, shape_recognized=True)


def compute_roster_analytics(leads: Iterable[LeadRecord]) -> RosterAnalytics:
    """
    Derive totals from the lead roster.

    - total_verticals = number of lead entries
    - total_members   = sum of member_count (absent values count as 0)

    This is deliberately independent of the attendance-record analytics.
    """
    total_verticals = 0
    total_members = 0
    for lead in leads:
        total_verticals += 1
        total_members += lead.member_count

    return RosterAnalytics(total_verticals=total_verticals, total_members=total_members)
