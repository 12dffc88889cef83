# trackee/services/members.py
from __future__ import annotations

import logging
from typing import Optional

from trackee.schemas.member import MemberCreate
from trackee.schemas.results import ActionResult
from trackee.services.api_client import ApiClientError, TrackeeApiClient

logger = logging.getLogger(__name__)


class MemberService:
    """
    Adds members to the signed-in lead's vertical, one at a time or in bulk
    from an Excel sheet.
    """

    def __init__(self, api_client: TrackeeApiClient) -> None:
        self.api = api_client

    async def add_member(self, member: MemberCreate) -> ActionResult:
        try:
            await self.api.add_member(member.model_dump())
        except ApiClientError as exc:
            logger.warning("Adding member %s failed: %s", member.roll_no, exc)
            return ActionResult(ok=False, message=exc.server_message or "Failed to add member.")
        return ActionResult(ok=True, message="Member added successfully!")

    async def upload_members_xlsx(
        self,
        filename: Optional[str],
        content: Optional[bytes],
    ) -> ActionResult:
        """
        Upload an .xlsx workbook of members.

        The file is checked locally (present, .xlsx extension) before any
        request is made.
        """
        if not filename or content is None:
            return ActionResult(ok=False, message="Please select an Excel file.")
        if not filename.lower().endswith(".xlsx"):
            return ActionResult(ok=False, message="Only .xlsx files are supported.")

        try:
            await self.api.upload_members_xlsx(filename, content)
        except ApiClientError as exc:
            logger.warning("Uploading %s failed: %s", filename, exc)
            return ActionResult(
                ok=False, message=exc.server_message or "Failed to upload members."
            )
        return ActionResult(ok=True, message="Members added successfully!")
