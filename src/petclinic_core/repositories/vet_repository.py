"""
Veterinarian repository.
"""

from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Vet
from .owner_repository import Page, check_paging


class VetRepository:
    """Read access to veterinarians and their specialties."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[Vet]:
        """All vets ordered by last name, then first name."""
        result = await self.session.scalars(
            select(Vet).order_by(Vet.last_name, Vet.first_name, Vet.id)
        )
        return list(result.all())

    async def find_page(self, page: int = 1, size: int = 5) -> Page[Vet]:
        check_paging(page, size)

        total = await self.session.scalar(select(func.count()).select_from(Vet))
        result = await self.session.scalars(
            select(Vet)
            .order_by(Vet.last_name, Vet.first_name, Vet.id)
            .offset((page - 1) * size)
            .limit(size)
        )
        return Page(items=list(result.all()), total=total or 0, page=page, size=size)

    async def save(self, vet: Vet) -> Vet:
        self.session.add(vet)
        await self.session.flush()
        return vet
