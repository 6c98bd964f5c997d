"""
Owner Pydantic schemas for input validation and serialization.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .pet import PetResponse

TELEPHONE_PATTERN = re.compile(r"^\d{10}$")


class OwnerCreate(BaseModel):
    """Schema for creating or editing an owner's contact details."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., description="Owner's first name", max_length=30)
    last_name: str = Field(..., description="Owner's last name", max_length=30)
    address: str = Field(..., description="Street address", max_length=255)
    city: str = Field(..., description="City", max_length=80)
    telephone: str = Field(..., description="10-digit telephone number")

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def validate_required_fields(cls, v: str) -> str:
        """Validate required string fields."""
        if not v or not v.strip():
            raise ValueError("Field is required")
        return v.strip()

    @field_validator("telephone")
    @classmethod
    def validate_telephone(cls, v: str) -> str:
        """Validate telephone number."""
        if not TELEPHONE_PATTERN.match(v):
            raise ValueError("Telephone must be a 10-digit number")
        return v


class OwnerResponse(BaseModel):
    """Schema for owner response data, including pets and their visits."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Owner identifier")
    is_new: bool = Field(..., description="Whether the owner has been stored yet")
    first_name: Optional[str] = Field(None, description="Owner's first name")
    last_name: Optional[str] = Field(None, description="Owner's last name")
    address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = Field(None, description="City")
    telephone: Optional[str] = Field(None, description="Telephone number")
    pets: List[PetResponse] = Field(
        default_factory=list, description="Pets in catalog order"
    )
