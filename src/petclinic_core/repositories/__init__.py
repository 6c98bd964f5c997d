"""
Repositories loading and saving clinic aggregates.
"""

from .owner_repository import OwnerRepository, Page
from .vet_repository import VetRepository

__all__ = [
    "OwnerRepository",
    "VetRepository",
    "Page",
]
