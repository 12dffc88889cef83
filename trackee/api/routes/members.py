# trackee/api/routes/members.py
from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from trackee.api.dependencies.session import get_api_client, require_role
from trackee.schemas.identity import Role
from trackee.schemas.member import MemberCreate
from trackee.schemas.results import ActionResult
from trackee.services.api_client import TrackeeApiClient
from trackee.services.members import MemberService

router = APIRouter(
    prefix="/members",
    tags=["Members"],
    dependencies=[Depends(require_role(Role.VERTICAL_LEAD))],
)


def _raise_on_failure(result: ActionResult) -> ActionResult:
    if not result.ok:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=result.message)
    return result


@router.post(
    "",
    response_model=ActionResult,
    status_code=HTTPStatus.CREATED,
    summary="Add a member to the signed-in lead's vertical",
)
async def add_member(
    payload: MemberCreate,
    api_client: TrackeeApiClient = Depends(get_api_client),
) -> ActionResult:
    return _raise_on_failure(await MemberService(api_client).add_member(payload))


@router.post(
    "/upload",
    response_model=ActionResult,
    status_code=HTTPStatus.CREATED,
    summary="Bulk-add members from an Excel workbook",
    description=(
        "Accepts a multipart upload under the `file` field. Only `.xlsx` files "
        "are forwarded to the backend; a missing or non-xlsx file returns 400."
    ),
    responses={
        400: {
            "description": "No file, wrong file type, or the backend rejected the sheet.",
            "content": {
                "application/json": {"example": {"detail": "Please select an Excel file."}}
            },
        }
    },
)
async def upload_members(
    file: Optional[UploadFile] = File(default=None, description="Members workbook (.xlsx)."),
    api_client: TrackeeApiClient = Depends(get_api_client),
) -> ActionResult:
    filename = file.filename if file is not None else None
    content = await file.read() if file is not None else None
    return _raise_on_failure(
        await MemberService(api_client).upload_members_xlsx(filename, content)
    )
