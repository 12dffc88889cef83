# trackee/services/api_client.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from trackee.core.config import get_settings
from trackee.schemas.identity import Role

logger = logging.getLogger(__name__)


class ApiClientError(RuntimeError):
    """
    Raised when a call to the attendance backend fails.

    `status_code` is None for transport failures (no response at all).
    `server_message` carries the backend's `error`/`message` field when the
    response had one, so callers can surface it verbatim.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message


_ROLE_PREFIX = {
    Role.GLOBAL_ADMIN: "/global-admin",
    Role.VERTICAL_LEAD: "/vertical-lead",
}


def extract_error_message(payload: Any) -> Optional[str]:
    """
    Return the human-readable error carried by a backend payload, if any.
    """
    if not isinstance(payload, dict):
        return None
    for key in ("error", "message"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


class TrackeeApiClient:
    """
    Async client for the attendance backend.

    Responsibilities
    ----------------
    - Exchange credentials for a server-managed session cookie.
    - Carry that cookie jar across requests for the lifetime of the client.
    - Expose one method per backend operation used by the dashboard.
    - Translate every failure into ApiClientError.

    Notes
    -----
    - The session cookie is never inspected or re-validated locally.
    - No retries are performed here.
    """

    def __init__(self, base_url: str, timeout_seconds: float = 10.0) -> None:
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._cookies = httpx.Cookies()

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: Any = None,
    ) -> Any:
        """
        Issue a request against the backend and return the decoded JSON body.

        Raises
        ------
        ApiClientError
            On transport failures and on non-2xx responses.
        """
        url = self._url(path)
        kwargs: Dict[str, Any] = {"headers": {"Accept": "application/json"}}
        if json is not None:
            kwargs["json"] = json
        if files is not None:
            kwargs["files"] = files

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                cookies=self._cookies,
            ) as client:
                resp = await client.request(method.upper(), url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method.upper(), url, exc)
            raise ApiClientError(f"Request to {url} failed: {exc}") from exc

        # Keep the session cookie (set on login, cleared on logout).
        self._cookies.update(resp.cookies)

        payload = self._decode(resp)
        if resp.status_code // 100 != 2:
            raise ApiClientError(
                f"{method.upper()} {path} failed (status={resp.status_code})",
                status_code=resp.status_code,
                server_message=extract_error_message(payload),
            )
        return payload

    @staticmethod
    def _decode(resp: Any) -> Any:
        try:
            return resp.json()
        except ValueError:
            return {}

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    async def login(self, role: Role, identifier: str, password: str) -> Dict[str, Any]:
        """
        Exchange credentials for a session.

        Global admins sign in with a username, vertical leads with their roll
        number. Returns the response body (empty dict when the body is not a
        JSON object).
        """
        if role == Role.GLOBAL_ADMIN:
            body = {"username": identifier, "password": password}
        else:
            body = {"roll_no": identifier, "password": password}

        payload = await self._request("POST", f"{_ROLE_PREFIX[role]}/login", json=body)
        return payload if isinstance(payload, dict) else {}

    async def logout(self, role: Role) -> None:
        """
        Terminate the server-side session for the given role.
        """
        await self._request("POST", f"{_ROLE_PREFIX[role]}/logout")

    def clear_session(self) -> None:
        """
        Drop the session cookie so later requests go out unauthenticated.

        Kept separate from `logout` so the caller decides when the local
        session ends, whatever the outcome of the logout request.
        """
        self._cookies.clear()

    # ------------------------------------------------------------------
    # Global admin
    # ------------------------------------------------------------------

    async def fetch_attendance_summary(self) -> Any:
        return await self._request("GET", "/global-admin/attendance-summary")

    async def fetch_lead_roster(self) -> Any:
        return await self._request("GET", "/global-admin/vertical-leads")

    async def create_lead(self, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", "/global-admin/vertical-leads", json=payload)

    async def update_lead(self, roll_no: str, fields: Dict[str, Any]) -> Any:
        return await self._request(
            "PUT", f"/global-admin/vertical-leads/{roll_no}", json=fields
        )

    async def delete_lead(self, roll_no: str) -> Any:
        return await self._request("DELETE", f"/global-admin/vertical-leads/{roll_no}")

    # ------------------------------------------------------------------
    # Vertical lead
    # ------------------------------------------------------------------

    async def add_member(self, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", "/vertical-lead/members", json=payload)

    async def upload_members_xlsx(self, filename: str, content: bytes) -> Any:
        files = {
            "file": (
                filename,
                content,
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )
        }
        return await self._request("POST", "/vertical-lead/members/upload", files=files)

    async def create_meeting(self, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", "/vertical-lead/meetings", json=payload)


def build_api_client() -> TrackeeApiClient:
    """
    Construct a TrackeeApiClient from application settings.
    """
    settings = get_settings()
    return TrackeeApiClient(
        base_url=settings.API_BASE_URL,
        timeout_seconds=settings.API_TIMEOUT_SECONDS,
    )
