# trackee/schemas/member.py
from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    """
    A single member added to a vertical by its lead.
    """

    name: str = Field(..., min_length=1, examples=["Ravi Kumar"])
    roll_no: str = Field(..., min_length=1, examples=["22EC017"])
    year: int = Field(1, ge=1, le=5, description="Year of study (1-5).", examples=[2])
    department: str = Field(..., min_length=1, examples=["ECE"])
