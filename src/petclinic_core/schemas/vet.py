"""
Veterinarian Pydantic schemas for serialization.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SpecialtyResponse(BaseModel):
    """Schema for specialty data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Specialty identifier")
    name: Optional[str] = Field(None, description="Specialty name")


class VetResponse(BaseModel):
    """Schema for veterinarian response data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Vet identifier")
    first_name: Optional[str] = Field(None, description="Vet's first name")
    last_name: Optional[str] = Field(None, description="Vet's last name")
    specialties: List[SpecialtyResponse] = Field(
        default_factory=list, description="Specialties sorted by name"
    )


class VetListResponse(BaseModel):
    """Schema for a page of veterinarians."""

    vets: List[VetResponse] = Field(default_factory=list, description="Vets on the page")
    total: int = Field(..., description="Total number of vets", ge=0)
    page: int = Field(1, description="Current page number", ge=1)
    size: int = Field(..., description="Page size", ge=1)
