"""
Veterinarian model for the petclinic-core package.

This module contains the Vet SQLAlchemy model and its Specialty value object.
"""

from typing import List, Optional

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BaseModel, NamedModel

vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", ForeignKey("vets.id", ondelete="CASCADE"), nullable=False),
    Column(
        "specialty_id",
        ForeignKey("specialties.id", ondelete="CASCADE"),
        nullable=False,
    ),
)


class Specialty(NamedModel):
    """Medical specialty, e.g. radiology, surgery."""

    __tablename__ = "specialties"


class Vet(BaseModel):
    """
    Veterinarian with a set of specialties.

    Specialties are stored in whatever order they were added; ``specialties``
    always returns them sorted by name.
    """

    __tablename__ = "vets"

    first_name: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(
        String(30), nullable=True, index=True
    )

    assigned_specialties: Mapped[List[Specialty]] = relationship(
        secondary=vet_specialties, lazy="selectin"
    )

    def __repr__(self) -> str:
        return (
            f"<Vet(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )

    @property
    def specialties(self) -> List[Specialty]:
        """Specialties sorted ascending by name."""
        return sorted(self.assigned_specialties, key=lambda s: s.name or "")

    @property
    def nr_of_specialties(self) -> int:
        """Number of specialties attached to this vet."""
        return len(self.assigned_specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        """Attach a specialty. No deduplication is performed."""
        self.assigned_specialties.append(specialty)

    @property
    def display_name(self) -> str:
        """Get a display-friendly name for the vet."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
