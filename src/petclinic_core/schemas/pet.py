"""
Pet Pydantic schemas for input validation and serialization.

This module contains the create, update and response schemas for pets and
their pet types.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .visit import VisitResponse


def _validate_pet_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("Pet name is required")
    return v.strip()


def _validate_birth_date(v: Optional[date]) -> Optional[date]:
    if v is not None and v > date.today():
        raise ValueError("Birth date cannot be in the future")
    return v


class PetCreate(BaseModel):
    """Schema for registering a new pet with an owner."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Pet's name", max_length=80)
    birth_date: date = Field(..., description="Pet's birth date")
    type_id: int = Field(..., description="Identifier of the pet type", gt=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate pet name."""
        return _validate_pet_name(v)

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date) -> date:
        """Validate birth date."""
        return _validate_birth_date(v)


class PetUpdate(BaseModel):
    """Schema for editing an existing pet. The pet type may stay unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Pet's name", max_length=80)
    birth_date: date = Field(..., description="Pet's birth date")
    type_id: Optional[int] = Field(
        None, description="Identifier of the pet type", gt=0
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate pet name."""
        return _validate_pet_name(v)

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date) -> date:
        """Validate birth date."""
        return _validate_birth_date(v)


class PetTypeResponse(BaseModel):
    """Schema for pet type data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Pet type identifier")
    name: Optional[str] = Field(None, description="Pet type name")


class PetResponse(BaseModel):
    """Schema for pet response data, including its visits."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Pet identifier")
    name: Optional[str] = Field(None, description="Pet's name")
    birth_date: Optional[date] = Field(None, description="Pet's birth date")
    type: Optional[PetTypeResponse] = Field(None, description="Kind of animal")
    photo: str = Field(..., description="Stored photo filename or the default")
    visits: List[VisitResponse] = Field(
        default_factory=list, description="Visits in ledger order"
    )
