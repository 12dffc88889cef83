# trackee/api/dependencies/session.py
from http import HTTPStatus

from fastapi import Depends, HTTPException, Request

from trackee.schemas.identity import Role
from trackee.services.api_client import TrackeeApiClient
from trackee.services.session_manager import SessionManager


def get_session_manager(request: Request) -> SessionManager:
    """
    Return the SessionManager constructed by the app factory.
    """
    return request.app.state.session_manager


def get_api_client(request: Request) -> TrackeeApiClient:
    return request.app.state.api_client


def require_role(role: Role):
    """
    Build a dependency that only lets the given actor type through.

    Rules
    -----
    - No identity            -> 401
    - Identity of other role -> 403
    """

    async def _guard(session: SessionManager = Depends(get_session_manager)) -> SessionManager:
        identity = session.current_identity
        if identity is None:
            raise HTTPException(
                status_code=HTTPStatus.UNAUTHORIZED,
                detail="Not authenticated.",
            )
        if identity.role != role:
            raise HTTPException(
                status_code=HTTPStatus.FORBIDDEN,
                detail="You don't have permission to access this page.",
            )
        return session

    return _guard
