"""
Pet Clinic Core Package

Domain model and supporting utilities for a small veterinary clinic:
owners possess pets, pets accumulate visits, veterinarians carry
specialties, and photos can be attached to pet records.

This package includes:

- SQLAlchemy models for Owners, Pets, Visits, Vets and Specialties, with the
  aggregate rules that guard the Owner -> Pet -> Visit composition
- Pet photo validation and storage
- Pydantic schemas for input validation and serialization
- Async database session management and repositories
- Configuration, logging and a shared exception hierarchy

Quick Start:
    >>> from petclinic_core.models import Owner, Pet, Visit
    >>> owner = Owner(first_name="George", last_name="Franklin")
    >>> owner.add_pet(Pet(id=1, name="Leo"))
    >>> owner.add_visit(1, Visit(description="rabies shot"))
    >>> len(owner.get_pet_by_name("LEO").visits)
    1

Requirements:
    - Python 3.11+
    - SQLAlchemy 2.0+
    - Pydantic 2.5+
"""

__version__ = "0.1.0"
__license__ = "MIT"

from . import database, exceptions, models, repositories, schemas, services, utils

# Convenience imports for common usage patterns
from .exceptions import (
    FileTooLargeException,
    InvalidArgumentException,
    InvalidFilenameException,
    PetClinicException,
    UnsupportedFileTypeException,
)
from .models import Owner, Pet, PetType, Specialty, Vet, Visit
from .services import PetPhotoStorage, PhotoValidator

__all__ = [
    "__version__",
    "__license__",
    # Core modules
    "database",
    "exceptions",
    "models",
    "repositories",
    "schemas",
    "services",
    "utils",
    # Convenience imports
    "PetClinicException",
    "InvalidArgumentException",
    "FileTooLargeException",
    "UnsupportedFileTypeException",
    "InvalidFilenameException",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
    "Vet",
    "Specialty",
    "PhotoValidator",
    "PetPhotoStorage",
]
