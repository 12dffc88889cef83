# trackee/services/dashboard.py
from __future__ import annotations

import logging
from typing import Any, Awaitable

from trackee.schemas.dashboard import DashboardSnapshot
from trackee.schemas.lead import LeadCreate, LeadUpdate
from trackee.schemas.results import ActionResult
from trackee.services.api_client import ApiClientError, TrackeeApiClient
from trackee.services.attendance_aggregator import aggregate, normalize_attendance_summary
from trackee.services.roster import compute_roster_analytics, normalize_roster_response

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Data behind the global admin dashboard.

    Two independent computations are performed on every load:

    - attendance analytics, aggregated from the attendance summary records
    - roster analytics, derived from the lead roster

    They are returned side by side and never merged.

    Lead mutations follow an invalidate-and-refetch contract: after a
    successful create/update/delete the whole snapshot is reloaded. Nothing
    is updated optimistically.
    """

    def __init__(self, api_client: TrackeeApiClient) -> None:
        self.api = api_client

    async def load(self) -> DashboardSnapshot:
        """
        Fetch the summary and the roster and compute both analytics paths.

        Fetch failures degrade to empty data so the dashboard still renders.
        """
        summary_payload = await self._fetch_or_empty(
            self.api.fetch_attendance_summary(), "attendance summary"
        )
        roster_payload = await self._fetch_or_empty(
            self.api.fetch_lead_roster(), "lead roster"
        )

        records, summary_ok = normalize_attendance_summary(summary_payload)
        if not summary_ok and summary_payload is not None:
            logger.warning("Unrecognized attendance summary shape: %s", type(summary_payload).__name__)

        roster = normalize_roster_response(roster_payload)
        if not roster.shape_recognized and roster_payload is not None:
            logger.warning("Unrecognized lead roster shape: %s", type(roster_payload).__name__)

        result = aggregate(records)

        return DashboardSnapshot(
            vertical_averages=result.vertical_averages,
            attendance_analytics=result.analytics,
            roster_analytics=compute_roster_analytics(roster.leads),
            leads=roster.leads,
            roster_shape_recognized=roster.shape_recognized,
            summary_shape_recognized=summary_ok,
        )

    async def _fetch_or_empty(self, call: Awaitable[Any], what: str) -> Any:
        try:
            return await call
        except ApiClientError as exc:
            logger.warning("Failed to fetch %s: %s", what, exc)
            return None

    # ------------------------------------------------------------------
    # Lead management
    # ------------------------------------------------------------------

    async def create_lead(self, lead: LeadCreate) -> ActionResult:
        return await self._mutate(
            self.api.create_lead(lead.to_payload()),
            success="Vertical lead created successfully!",
            fallback="Failed to create vertical lead.",
        )

    async def update_lead(self, roll_no: str, fields: LeadUpdate) -> ActionResult:
        payload = fields.to_payload()
        if not payload:
            return ActionResult(ok=False, message="No fields to update.")
        return await self._mutate(
            self.api.update_lead(roll_no, payload),
            success="Vertical lead updated successfully!",
            fallback="Failed to update vertical lead.",
        )

    async def delete_lead(self, roll_no: str) -> ActionResult:
        return await self._mutate(
            self.api.delete_lead(roll_no),
            success="Vertical lead deleted successfully!",
            fallback="Failed to delete vertical lead.",
        )

    async def _mutate(self, call: Awaitable[Any], *, success: str, fallback: str) -> ActionResult:
        try:
            response = await call
        except ApiClientError as exc:
            logger.warning("Lead mutation failed: %s", exc)
            return ActionResult(ok=False, message=exc.server_message or fallback)

        message = success
        if isinstance(response, dict) and isinstance(response.get("message"), str):
            message = response["message"]

        # Derived state is always refetched rather than patched locally.
        snapshot = await self.load()
        return ActionResult(ok=True, message=message, data=snapshot)
