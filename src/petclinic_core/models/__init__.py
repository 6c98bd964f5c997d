"""
Database models for the petclinic-core package.

This module contains SQLAlchemy models for all entities of the clinic
domain: owners with their pets and visits, and veterinarians with their
specialties.
"""

# Base model will be imported by all other models
from .base import Base, BaseModel, NamedModel
from .identity import UNSAVED, EntityIdentity, Persisted, Unsaved, identity_of

# Core entity models
from .owner import Owner
from .pet import DEFAULT_PET_PHOTO, Pet, PetType
from .vet import Specialty, Vet, vet_specialties
from .visit import Visit

__all__ = [
    "Base",
    "BaseModel",
    "NamedModel",
    "EntityIdentity",
    "Unsaved",
    "Persisted",
    "UNSAVED",
    "identity_of",
    "Owner",
    "Pet",
    "PetType",
    "DEFAULT_PET_PHOTO",
    "Visit",
    "Vet",
    "Specialty",
    "vet_specialties",
]
