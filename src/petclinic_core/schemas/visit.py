"""
Visit Pydantic schemas for input validation and serialization.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VisitCreate(BaseModel):
    """Schema for recording a new visit."""

    model_config = ConfigDict(str_strip_whitespace=True)

    visit_date: date = Field(
        default_factory=date.today, description="Date of the visit"
    )
    description: str = Field(
        ..., description="What happened during the visit", max_length=255
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate visit description."""
        if not v or not v.strip():
            raise ValueError("Visit description is required")
        return v.strip()


class VisitResponse(BaseModel):
    """Schema for visit response data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Visit identifier")
    visit_date: date = Field(..., description="Date of the visit")
    description: Optional[str] = Field(None, description="Visit description")
