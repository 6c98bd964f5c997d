"""
Pet model for the petclinic-core package.

This module contains the Pet SQLAlchemy model, its PetType value object and
the visit ledger each pet owns.
"""

from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import NamedModel
from .visit import Visit

if TYPE_CHECKING:
    from .owner import Owner

# Photo shown for pets that never had one uploaded; never deleted from storage.
DEFAULT_PET_PHOTO = "default-pet.svg"


class PetType(NamedModel):
    """Kind of animal, e.g. cat, dog, hamster."""

    __tablename__ = "types"


class Pet(NamedModel):
    """
    Pet owned by exactly one owner.

    Each pet keeps an append-only ledger of visits in insertion order.
    The ledger is loaded from the database ordered by visit date, but is
    never re-sorted in memory.
    """

    __tablename__ = "pets"

    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner of the pet",
    )

    birth_date: Mapped[Optional[date]] = mapped_column(
        Date, nullable=True, comment="Pet's birth date"
    )

    type_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("types.id"), nullable=True, comment="Kind of animal"
    )

    photo_filename: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="Stored name of the pet's photo"
    )

    __table_args__ = (Index("idx_pets_owner_name", "owner_id", "name"),)

    type: Mapped[Optional[PetType]] = relationship(lazy="selectin")
    owner: Mapped["Owner"] = relationship(back_populates="pets")
    visits: Mapped[List[Visit]] = relationship(
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by=Visit.visit_date,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of the Pet model."""
        return f"<Pet(id={self.id}, name='{self.name}', birth_date={self.birth_date})>"

    def add_visit(self, visit: Visit) -> None:
        """
        Append a visit to this pet's ledger.

        The visit keeps whatever identity it has; ids are assigned by the
        persistence layer on flush.
        """
        self.visits.append(visit)

    @property
    def photo(self) -> str:
        """Stored photo filename, or the default placeholder."""
        return self.photo_filename or DEFAULT_PET_PHOTO
