# trackee/schemas/lead.py
from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator


# --------------------------------------------------------------------------
# Roster entry (GET /global-admin/vertical-leads)
# --------------------------------------------------------------------------

class LeadRecord(BaseModel):
    """
    One vertical lead as listed by the roster endpoint.

    Fields are optional because the roster response shape is not fixed;
    missing values are defaulted instead of failing the whole listing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = Field(None, examples=["Asha Rao"])
    roll_no: str | None = Field(
        None,
        validation_alias=AliasChoices("roll_no", "rollNo"),
        examples=["21CS042"],
    )
    vertical: str | None = Field(None, examples=["Web"])
    department: str | None = Field(None, examples=["CSE"])
    member_count: int = Field(
        0,
        validation_alias=AliasChoices("member_count", "members_count", "memberCount"),
        description="Number of members in the lead's vertical. Absent values count as 0.",
        examples=[12],
    )

    @field_validator("name", "roll_no", "vertical", "department", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (str, int)):
            return str(value)
        return None

    @field_validator("member_count", mode="before")
    @classmethod
    def _count(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        return int(value)


class RosterNormalization(BaseModel):
    """
    Roster response reduced to a flat list of leads.

    `shape_recognized` is False when the payload matched none of the
    accepted shapes; `leads` is then empty.
    """

    leads: list[LeadRecord] = Field(default_factory=list)
    shape_recognized: bool = False


class RosterAnalytics(BaseModel):
    """
    Totals derived from the lead roster. Independent of the totals derived
    from attendance records and not expected to agree with them.
    """

    total_verticals: int = Field(..., description="Number of lead entries.", examples=[4])
    total_members: int = Field(
        ...,
        description="Sum of member_count over all leads.",
        examples=[48],
    )


# --------------------------------------------------------------------------
# Mutations (POST / PUT /global-admin/vertical-leads)
# --------------------------------------------------------------------------

class LeadCreate(BaseModel):
    """
    Payload for registering a new vertical lead.
    """

    name: str = Field(..., min_length=1, examples=["Asha Rao"])
    roll_no: str = Field(..., min_length=1, examples=["21CS042"])
    vertical: str = Field(..., min_length=1, examples=["Web"])
    department: str = Field(..., min_length=1, examples=["CSE"])
    password: SecretStr = Field(..., description="Initial password for the lead account.")

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(exclude={"password"})
        payload["password"] = self.password.get_secret_value()
        return payload


class LeadUpdate(BaseModel):
    """
    Partial update of a vertical lead. Only provided fields are sent.
    """

    name: str | None = Field(default=None)
    vertical: str | None = Field(default=None)
    department: str | None = Field(default=None)
    password: SecretStr | None = Field(default=None)

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(exclude_none=True, exclude={"password"})
        if self.password is not None:
            payload["password"] = self.password.get_secret_value()
        return payload
