# trackee/api/routes/meetings.py
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException

from trackee.api.dependencies.session import get_api_client, require_role
from trackee.schemas.identity import Role
from trackee.schemas.meeting import MeetingCreate
from trackee.schemas.results import ActionResult
from trackee.services.api_client import TrackeeApiClient
from trackee.services.meetings import MeetingService

router = APIRouter(
    prefix="/meetings",
    tags=["Meetings"],
    dependencies=[Depends(require_role(Role.VERTICAL_LEAD))],
)


@router.post(
    "",
    response_model=ActionResult,
    status_code=HTTPStatus.CREATED,
    summary="Schedule a meeting for the signed-in lead's vertical",
    description=(
        "Validates the form (name, date, agenda, future date) before calling the "
        "backend. Validation and backend failures return 400 with the message."
    ),
)
async def create_meeting(
    payload: MeetingCreate,
    api_client: TrackeeApiClient = Depends(get_api_client),
) -> ActionResult:
    result = await MeetingService(api_client).create_meeting(payload)
    if not result.ok:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=result.message)
    return result
