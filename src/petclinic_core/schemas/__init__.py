"""
Pydantic schemas for data validation and serialization.

This module contains Pydantic schemas for validating clinic input and
serializing owners, pets, visits and veterinarians.
"""

from .owner import OwnerCreate, OwnerResponse
from .pet import PetCreate, PetResponse, PetTypeResponse, PetUpdate
from .vet import SpecialtyResponse, VetListResponse, VetResponse
from .visit import VisitCreate, VisitResponse

__all__ = [
    # Owner schemas
    "OwnerCreate",
    "OwnerResponse",
    # Pet schemas
    "PetCreate",
    "PetUpdate",
    "PetResponse",
    "PetTypeResponse",
    # Visit schemas
    "VisitCreate",
    "VisitResponse",
    # Vet schemas
    "VetResponse",
    "VetListResponse",
    "SpecialtyResponse",
]
