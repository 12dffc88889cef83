# trackee/api/routes/session.py
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException

from trackee.api.dependencies.session import get_session_manager
from trackee.schemas.identity import Credentials, SessionRead
from trackee.services.session_manager import SessionManager

router = APIRouter(prefix="/session", tags=["Session"])


@router.get(
    "",
    response_model=SessionRead,
    summary="Current session state",
    description="Return who is signed in (if anyone) and whether a login/logout is in flight.",
)
async def read_session(
    session: SessionManager = Depends(get_session_manager),
) -> SessionRead:
    return session.snapshot()


@router.post(
    "/login",
    response_model=SessionRead,
    summary="Sign in as a global admin or a vertical lead",
    description=(
        "Exchange credentials with the attendance backend.\n\n"
        "- `global_admin`: identifier is the admin username.\n"
        "- `vertical_lead`: identifier is the lead's roll number.\n\n"
        "Returns 401 with the backend's message (or a generic one) on failure."
    ),
    responses={
        401: {
            "description": "Login failed.",
            "content": {"application/json": {"example": {"detail": "Invalid credentials"}}},
        }
    },
)
async def login(
    credentials: Credentials,
    session: SessionManager = Depends(get_session_manager),
) -> SessionRead:
    ok = await session.login(credentials)
    if not ok:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=session.last_error or session.fallback_message,
        )
    return session.snapshot()


@router.post(
    "/logout",
    response_model=SessionRead,
    summary="Sign out",
    description="Always ends the local session, even if the backend cannot be reached.",
)
async def logout(
    session: SessionManager = Depends(get_session_manager),
) -> SessionRead:
    await session.logout()
    return session.snapshot()
