# tests/conftest.py
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from trackee.main import create_app
from trackee.schemas.identity import Role
from trackee.services.api_client import ApiClientError


class FakeApiClient:
    """
    In-memory stand-in for TrackeeApiClient.

    Every call is recorded in `calls`; errors can be injected per operation.
    """

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.login_response: Dict[str, Any] = {"message": "Login successful"}
        self.login_error: Optional[ApiClientError] = None
        self.logout_error: Optional[ApiClientError] = None
        self.summary: Any = {"attendanceSummary": []}
        self.roster: Any = {"vertical_leads": []}
        self.mutation_error: Optional[ApiClientError] = None
        self.meeting_response: Any = {"message": "Meeting created", "meeting": {"id": 1}}

    async def login(self, role: Role, identifier: str, password: str) -> Dict[str, Any]:
        self.calls.append(("login", role, identifier))
        if self.login_error is not None:
            raise self.login_error
        return self.login_response

    async def logout(self, role: Role) -> None:
        self.calls.append(("logout", role))
        if self.logout_error is not None:
            raise self.logout_error

    def clear_session(self) -> None:
        self.calls.append(("clear_session",))

    async def fetch_attendance_summary(self) -> Any:
        self.calls.append(("fetch_attendance_summary",))
        return self.summary

    async def fetch_lead_roster(self) -> Any:
        self.calls.append(("fetch_lead_roster",))
        return self.roster

    async def _mutation(self, name: str, *args: Any) -> Any:
        self.calls.append((name, *args))
        if self.mutation_error is not None:
            raise self.mutation_error
        return {"message": f"{name} ok"}

    async def create_lead(self, payload: Dict[str, Any]) -> Any:
        return await self._mutation("create_lead", payload)

    async def update_lead(self, roll_no: str, fields: Dict[str, Any]) -> Any:
        return await self._mutation("update_lead", roll_no, fields)

    async def delete_lead(self, roll_no: str) -> Any:
        return await self._mutation("delete_lead", roll_no)

    async def add_member(self, payload: Dict[str, Any]) -> Any:
        return await self._mutation("add_member", payload)

    async def upload_members_xlsx(self, filename: str, content: bytes) -> Any:
        return await self._mutation("upload_members_xlsx", filename)

    async def create_meeting(self, payload: Dict[str, Any]) -> Any:
        self.calls.append(("create_meeting", payload))
        if self.mutation_error is not None:
            raise self.mutation_error
        return self.meeting_response

    def call_names(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture()
def fake_api() -> FakeApiClient:
    return FakeApiClient()


@pytest.fixture()
def client(fake_api: FakeApiClient) -> TestClient:
    """
    TestClient wired to a fresh app (and therefore a fresh session) per test.
    """
    app = create_app(api_client=fake_api)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def lead_login_payload() -> Dict[str, Any]:
    return {
        "message": "Login successful",
        "lead": {
            "name": "Asha Rao",
            "roll_no": "21CS042",
            "vertical": "Web",
            "department": "CSE",
        },
    }
