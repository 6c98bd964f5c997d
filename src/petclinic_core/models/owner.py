"""
Owner model for the petclinic-core package.

The owner is the root of the Owner -> Pet -> Visit aggregate. It holds the
catalog of pets it owns and exposes ``add_visit`` as the single entry point
for attaching a visit to one of those pets.
"""

import logging
from typing import List, Optional

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..exceptions import InvalidArgumentException
from .base import BaseModel
from .identity import Persisted
from .pet import Pet
from .visit import Visit

logger = logging.getLogger(__name__)


class Owner(BaseModel):
    """
    Pet owner and aggregate root for its pets and their visits.

    Pets are kept in an ordered list. Duplicate names are allowed; lookups by
    name return the first match in list order.
    """

    __tablename__ = "owners"

    first_name: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(
        String(30), nullable=True, index=True
    )
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    telephone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    __table_args__ = (Index("idx_owners_last_first", "last_name", "first_name"),)

    pets: Mapped[List[Pet]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        order_by=Pet.name,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return (
            f"<Owner(id={self.id}, new={self.is_new}, last_name='{self.last_name}', "
            f"first_name='{self.first_name}', address='{self.address}', "
            f"city='{self.city}', telephone='{self.telephone}')>"
        )

    @property
    def full_name(self) -> str:
        """First and last name joined for display."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def add_pet(self, pet: Pet) -> None:
        """Append a pet to this owner's catalog. Duplicate names are allowed."""
        self.pets.append(pet)

    def get_pet_by_id(self, pet_id: Optional[int]) -> Optional[Pet]:
        """
        Find a persisted pet by its identifier.

        Unsaved pets never match since they have no identifier yet.

        Args:
            pet_id: Identifier to look up

        Returns:
            The matching pet, or None if no persisted pet has that id
        """
        for pet in self.pets:
            identity = pet.identity
            if isinstance(identity, Persisted) and identity.id == pet_id:
                return pet
        return None

    def get_pet_by_name(
        self, name: Optional[str], ignore_new: bool = False
    ) -> Optional[Pet]:
        """
        Find the first pet whose name matches, ignoring case.

        Args:
            name: Name to look up
            ignore_new: Skip pets that have not been stored yet

        Returns:
            The first matching pet in catalog order, or None
        """
        if not name:
            return None

        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name is not None and pet.name.lower() == wanted:
                return pet
        return None

    def add_visit(self, pet_id: Optional[int], visit: Optional[Visit]) -> None:
        """
        Attach a visit to one of this owner's persisted pets.

        Either the visit is appended to the pet's ledger or an exception is
        raised and no ledger is touched. Nothing is flushed to the database.

        Args:
            pet_id: Identifier of the pet receiving the visit
            visit: Visit to append

        Raises:
            InvalidArgumentException: If pet_id or visit is None, if no
                pet of this owner has the given identifier, or if the visit
                is already in another pet's ledger
        """
        if pet_id is None:
            raise InvalidArgumentException(
                "Pet identifier must not be null", argument="pet_id"
            )
        if visit is None:
            raise InvalidArgumentException("Visit must not be null", argument="visit")

        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            raise InvalidArgumentException(
                "No such pet", argument="pet_id", value=pet_id
            )
        if visit.pet is not None and visit.pet is not pet:
            raise InvalidArgumentException(
                "Visit already belongs to another pet", argument="visit"
            )

        pet.add_visit(visit)
        logger.debug(f"Added visit to pet {pet_id} of owner {self.identity}")
