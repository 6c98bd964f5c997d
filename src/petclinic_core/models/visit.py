"""
Visit model for the petclinic-core package.

A visit is a dated, free-text record appended to a single pet's ledger.
"""

from datetime import date
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .pet import Pet


class Visit(BaseModel):
    """A single clinic visit owned by exactly one pet."""

    __tablename__ = "visits"

    def __init__(self, **kwargs: Any) -> None:
        """Initialize Visit, dating it today unless a date is given."""
        if kwargs.get("visit_date") is None:
            kwargs["visit_date"] = date.today()
        super().__init__(**kwargs)

    pet_id: Mapped[int] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        comment="Pet this visit belongs to",
    )

    visit_date: Mapped[date] = mapped_column(
        Date, nullable=False, comment="Date of the visit"
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="Free-text description of the visit"
    )

    __table_args__ = (Index("idx_visits_pet_date", "pet_id", "visit_date"),)

    pet: Mapped["Pet"] = relationship(back_populates="visits")

    def __repr__(self) -> str:
        return (
            f"<Visit(id={self.id}, date={self.visit_date}, "
            f"description='{self.description}')>"
        )
