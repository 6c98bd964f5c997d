"""
Owner repository.

Loads owner aggregates fully resident in memory (pets, pet types and visits
are eager-loaded) and saves them back.
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InvalidArgumentException
from ..models import Owner, PetType

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of query results."""

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    size: int = 5

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return (self.total + self.size - 1) // self.size


def check_paging(page: int, size: int) -> None:
    """Reject page numbers below 1 and non-positive page sizes."""
    if page < 1:
        raise InvalidArgumentException(
            "Page number must be at least 1", argument="page", value=page
        )
    if size < 1:
        raise InvalidArgumentException(
            "Page size must be positive", argument="size", value=size
        )


class OwnerRepository:
    """Data access for owners and pet types."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, owner_id: int) -> Optional[Owner]:
        """Load an owner with its pets and their visits, or None."""
        return await self.session.get(Owner, owner_id)

    async def find_by_last_name_prefix(
        self, prefix: str = "", page: int = 1, size: int = 5
    ) -> Page[Owner]:
        """
        Find owners whose last name starts with ``prefix``.

        An empty prefix matches every owner. Results are ordered by last
        name, then id.
        """
        check_paging(page, size)

        condition = Owner.last_name.startswith(prefix, autoescape=True)
        total = await self.session.scalar(
            select(func.count()).select_from(Owner).where(condition)
        )
        result = await self.session.scalars(
            select(Owner)
            .where(condition)
            .order_by(Owner.last_name, Owner.id)
            .offset((page - 1) * size)
            .limit(size)
        )
        owners = list(result.all())
        logger.debug(f"Found {total} owners with last name prefix '{prefix}'")
        return Page(items=owners, total=total or 0, page=page, size=size)

    async def find_pet_types(self) -> List[PetType]:
        """All pet types ordered by name."""
        result = await self.session.scalars(select(PetType).order_by(PetType.name))
        return list(result.all())

    async def find_pet_type(self, type_id: int) -> Optional[PetType]:
        return await self.session.get(PetType, type_id)

    async def save(self, owner: Owner) -> Owner:
        """
        Add the owner to the session and flush it.

        New pets and visits are inserted through the aggregate's cascades
        and receive their ids here.
        """
        self.session.add(owner)
        await self.session.flush()
        logger.debug(f"Saved owner {owner.identity}")
        return owner
