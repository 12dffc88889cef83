# trackee/services/session_manager.py
from __future__ import annotations

import logging
from typing import Any, Optional

from trackee.core.config import get_settings
from trackee.schemas.identity import (
    Credentials,
    GlobalAdminIdentity,
    Role,
    SessionRead,
    SessionState,
    VerticalLeadIdentity,
)
from trackee.services.api_client import ApiClientError, TrackeeApiClient

logger = logging.getLogger(__name__)

IdentityType = GlobalAdminIdentity | VerticalLeadIdentity


class SessionManager:
    """
    Single source of truth for "who is logged in".

    Hides the two login response shapes behind one normalized identity:

    - Global admin: the backend returns only a message, so the identity is
      built from the submitted identifier.
    - Vertical lead: the backend returns a `lead` object; without it the
      login does not resolve to an identity.

    States
    ------
    UNKNOWN -> AUTHENTICATED | UNAUTHENTICATED

    UNKNOWN is resolved by `initialize()` without contacting the backend;
    the server-managed session cookie is trusted as-is.

    Ordering
    --------
    Each login/logout takes a request token. A call that completes after a
    newer call was issued does not touch the identity, so a slow login can
    never resurrect a session that a later logout cleared. There is no
    locking; callers are expected to serialize session-mutating calls.
    """

    def __init__(
        self,
        api_client: TrackeeApiClient,
        *,
        fallback_message: Optional[str] = None,
    ) -> None:
        self._api = api_client
        self._fallback_message = fallback_message or get_settings().LOGIN_FALLBACK_MESSAGE

        self._identity: Optional[IdentityType] = None
        self._resolved = False
        self._in_flight = 0
        self._latest_token = 0
        self._last_error: Optional[str] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_identity(self) -> Optional[IdentityType]:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    @property
    def is_loading(self) -> bool:
        return not self._resolved or self._in_flight > 0

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def fallback_message(self) -> str:
        return self._fallback_message

    @property
    def state(self) -> SessionState:
        if self._identity is not None:
            return SessionState.AUTHENTICATED
        if not self._resolved:
            return SessionState.UNKNOWN
        return SessionState.UNAUTHENTICATED

    def snapshot(self) -> SessionRead:
        return SessionRead(
            state=self.state,
            is_loading=self.is_loading,
            is_authenticated=self.is_authenticated,
            identity=self._identity,
            last_error=self._last_error,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Resolve the initial UNKNOWN state. No server probe is performed.
        """
        self._resolved = True

    def _begin(self) -> int:
        self._latest_token += 1
        self._in_flight += 1
        return self._latest_token

    def _end(self) -> None:
        self._in_flight -= 1
        self._resolved = True

    async def login(self, credentials: Credentials) -> bool:
        """
        Sign in with the given credentials.

        Returns True iff an identity was constructed and installed. Expected
        failures (rejected credentials, network errors, missing lead payload)
        return False and leave the current identity untouched; the reason is
        available through `last_error`.
        """
        token = self._begin()
        try:
            try:
                data = await self._api.login(
                    credentials.role,
                    credentials.identifier,
                    credentials.password.get_secret_value(),
                )
            except ApiClientError as exc:
                logger.warning("Login failed for role=%s: %s", credentials.role.value, exc)
                self._fail(token, exc.server_message)
                return False

            identity = self._build_identity(credentials, data)
            if identity is None:
                logger.warning(
                    "Login for role=%s succeeded without a usable identity payload",
                    credentials.role.value,
                )
                self._fail(token, None)
                return False

            if token != self._latest_token:
                logger.info("Discarding stale login result (token=%s)", token)
                return False

            self._identity = identity
            self._last_error = None
            return True
        finally:
            self._end()

    async def logout(self) -> None:
        """
        Sign out. Always succeeds locally, even when the backend is unreachable.
        """
        token = self._begin()
        role = self._identity.role if self._identity is not None else Role.VERTICAL_LEAD
        try:
            await self._api.logout(role)
        except ApiClientError as exc:
            logger.warning("Logout call failed for role=%s: %s", role.value, exc)
        finally:
            if token == self._latest_token:
                self._identity = None
                self._last_error = None
                self._api.clear_session()
            self._end()

    def _fail(self, token: int, server_message: Optional[str]) -> None:
        if token == self._latest_token:
            self._last_error = server_message or self._fallback_message

    @staticmethod
    def _build_identity(credentials: Credentials, data: Any) -> Optional[IdentityType]:
        if credentials.role == Role.GLOBAL_ADMIN:
            return GlobalAdminIdentity(username=credentials.identifier)

        lead = data.get("lead") if isinstance(data, dict) else None
        if not isinstance(lead, dict):
            return None

        return VerticalLeadIdentity(
            name=str(lead.get("name") or ""),
            roll_no=str(lead.get("roll_no") or lead.get("rollNo") or ""),
            vertical=str(lead.get("vertical") or ""),
            department=str(lead.get("department") or ""),
        )
