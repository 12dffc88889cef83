# trackee/schemas/identity.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, SecretStr


class Role(str, Enum):
    """
    The two actor types that can sign in to the dashboard.
    """

    GLOBAL_ADMIN = "global_admin"
    VERTICAL_LEAD = "vertical_lead"


class SessionState(str, Enum):
    """
    Lifecycle state of the process-wide session.
    """

    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class GlobalAdminIdentity(BaseModel):
    """
    Identity of a signed-in global admin.

    The backend does not echo a username on login, so `username` is the
    identifier that was submitted with the credentials.
    """

    role: Literal[Role.GLOBAL_ADMIN] = Role.GLOBAL_ADMIN
    username: str = Field(
        ...,
        description="Identifier submitted at login.",
        examples=["admin"],
    )


class VerticalLeadIdentity(BaseModel):
    """
    Identity of a signed-in vertical lead, built from the `lead` object
    returned by the backend.
    """

    role: Literal[Role.VERTICAL_LEAD] = Role.VERTICAL_LEAD
    name: str = Field(..., description="Display name of the lead.", examples=["Asha Rao"])
    roll_no: str = Field(..., description="Roll number of the lead.", examples=["21CS042"])
    vertical: str = Field(..., description="Vertical managed by the lead.", examples=["Web"])
    department: str = Field(..., description="Department of the lead.", examples=["CSE"])


Identity = Annotated[
    Union[GlobalAdminIdentity, VerticalLeadIdentity],
    Field(discriminator="role"),
]


class Credentials(BaseModel):
    """
    Login form data. Held only for the duration of a login call.
    """

    identifier: str = Field(
        ...,
        min_length=1,
        description="Username for a global admin, roll number for a vertical lead.",
        examples=["admin"],
    )
    password: SecretStr = Field(..., description="Account password.")
    role: Role = Field(..., description="Actor type to sign in as.", examples=["global_admin"])


class SessionRead(BaseModel):
    """
    Read-only snapshot of the session manager.
    """

    state: SessionState
    is_loading: bool
    is_authenticated: bool
    identity: Identity | None = None
    last_error: str | None = Field(
        None,
        description="Human-readable reason for the most recent failed login, if any.",
    )
