# tests/test_members_service.py
import pytest
from pydantic import ValidationError

from trackee.schemas.member import MemberCreate
from trackee.services.api_client import ApiClientError
from trackee.services.members import MemberService


def _member() -> MemberCreate:
    return MemberCreate(name="Ravi", roll_no="22EC017", year=2, department="ECE")


def test_member_year_must_be_between_one_and_five():
    with pytest.raises(ValidationError):
        MemberCreate(name="Ravi", roll_no="22EC017", year=6, department="ECE")


@pytest.mark.asyncio
async def test_add_member_success(fake_api):
    result = await MemberService(fake_api).add_member(_member())

    assert result.ok is True
    assert result.message == "Member added successfully!"
    assert fake_api.calls[0][1]["roll_no"] == "22EC017"


@pytest.mark.asyncio
async def test_add_member_failure_uses_server_message(fake_api):
    fake_api.mutation_error = ApiClientError("400", status_code=400, server_message="Duplicate roll number")

    result = await MemberService(fake_api).add_member(_member())

    assert result.ok is False
    assert result.message == "Duplicate roll number"


@pytest.mark.asyncio
async def test_add_member_failure_fallback(fake_api):
    fake_api.mutation_error = ApiClientError("network")

    result = await MemberService(fake_api).add_member(_member())

    assert result.message == "Failed to add member."


@pytest.mark.asyncio
async def test_upload_requires_a_file(fake_api):
    result = await MemberService(fake_api).upload_members_xlsx(None, None)

    assert result.ok is False
    assert result.message == "Please select an Excel file."
    assert fake_api.calls == []


@pytest.mark.asyncio
async def test_upload_rejects_non_xlsx(fake_api):
    result = await MemberService(fake_api).upload_members_xlsx("members.csv", b"a,b")

    assert result.ok is False
    assert result.message == "Only .xlsx files are supported."
    assert fake_api.calls == []


@pytest.mark.asyncio
async def test_upload_success_and_failure(fake_api):
    service = MemberService(fake_api)

    ok = await service.upload_members_xlsx("Members.XLSX", b"PK")
    assert ok.ok is True
    assert ok.message == "Members added successfully!"

    fake_api.mutation_error = ApiClientError("down")
    failed = await service.upload_members_xlsx("members.xlsx", b"PK")
    assert failed.ok is False
    assert failed.message == "Failed to upload members."
