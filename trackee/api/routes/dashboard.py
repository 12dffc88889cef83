# trackee/api/routes/dashboard.py
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException, Path

from trackee.api.dependencies.session import get_api_client, require_role
from trackee.schemas.dashboard import DashboardSnapshot
from trackee.schemas.identity import Role
from trackee.schemas.lead import LeadCreate, LeadUpdate
from trackee.schemas.results import ActionResult
from trackee.services.api_client import TrackeeApiClient
from trackee.services.dashboard import DashboardService

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(require_role(Role.GLOBAL_ADMIN))],
)


def get_dashboard_service(
    api_client: TrackeeApiClient = Depends(get_api_client),
) -> DashboardService:
    return DashboardService(api_client)


def _raise_on_failure(result: ActionResult) -> ActionResult:
    if not result.ok:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=result.message)
    return result


@router.get(
    "",
    response_model=DashboardSnapshot,
    summary="Global admin dashboard data",
    description=(
        "Per-vertical attendance averages, attendance-derived totals and "
        "roster-derived totals.\n\n"
        "The two sets of totals come from different backend listings and are "
        "not reconciled."
    ),
)
async def read_dashboard(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSnapshot:
    return await service.load()


@router.post(
    "/leads",
    response_model=ActionResult,
    status_code=HTTPStatus.CREATED,
    summary="Create a vertical lead",
)
async def create_lead(
    payload: LeadCreate,
    service: DashboardService = Depends(get_dashboard_service),
) -> ActionResult:
    return _raise_on_failure(await service.create_lead(payload))


@router.patch(
    "/leads/{roll_no}",
    response_model=ActionResult,
    summary="Update a vertical lead",
)
async def update_lead(
    payload: LeadUpdate,
    roll_no: str = Path(..., description="Roll number of the lead to update."),
    service: DashboardService = Depends(get_dashboard_service),
) -> ActionResult:
    return _raise_on_failure(await service.update_lead(roll_no, payload))


@router.delete(
    "/leads/{roll_no}",
    response_model=ActionResult,
    summary="Delete a vertical lead",
)
async def delete_lead(
    roll_no: str = Path(..., description="Roll number of the lead to delete."),
    service: DashboardService = Depends(get_dashboard_service),
) -> ActionResult:
    return _raise_on_failure(await service.delete_lead(roll_no))
