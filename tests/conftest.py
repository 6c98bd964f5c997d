"""
Pytest configuration and fixtures for petclinic-core tests.

This module provides common fixtures for all tests in the package,
including factories for building aggregates in memory and an SQLite
database for repository tests.
"""

from datetime import date
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from petclinic_core.database import SessionManager, create_engine
from petclinic_core.models import Base, Owner, Pet, PetType, Specialty, Vet, Visit


# Factory classes for creating test entities
class OwnerFactory:
    """Factory for creating test Owner instances."""

    @staticmethod
    def build(**kwargs) -> Owner:
        """Build an Owner instance without saving to database."""
        defaults = {
            "first_name": "George",
            "last_name": "Franklin",
            "address": "110 W. Liberty St.",
            "city": "Madison",
            "telephone": "6085551023",
        }
        defaults.update(kwargs)
        return Owner(**defaults)


class PetFactory:
    """Factory for creating test Pet instances."""

    @staticmethod
    def build(name: str = "Leo", pet_id: Optional[int] = None, **kwargs) -> Pet:
        """Build a Pet; pass ``pet_id`` to simulate a stored pet."""
        defaults = {"name": name, "birth_date": date(2010, 9, 7)}
        if pet_id is not None:
            defaults["id"] = pet_id
        defaults.update(kwargs)
        return Pet(**defaults)


class VisitFactory:
    """Factory for creating test Visit instances."""

    @staticmethod
    def build(**kwargs) -> Visit:
        defaults = {"description": "rabies shot", "visit_date": date(2013, 1, 1)}
        defaults.update(kwargs)
        return Visit(**defaults)


@pytest.fixture
def owner_factory():
    return OwnerFactory


@pytest.fixture
def pet_factory():
    return PetFactory


@pytest.fixture
def visit_factory():
    return VisitFactory


@pytest.fixture
def owner_with_pets() -> Owner:
    """Owner holding two stored pets (ids 7 and 8) and one unsaved pet."""
    owner = OwnerFactory.build(id=6, first_name="Jean", last_name="Coleman")
    owner.add_pet(PetFactory.build("Samantha", pet_id=7))
    owner.add_pet(PetFactory.build("Max", pet_id=8))
    owner.add_pet(PetFactory.build("Bowser"))
    return owner


@pytest.fixture
def cat_type() -> PetType:
    return PetType(id=1, name="cat")


@pytest.fixture
def sample_vet() -> Vet:
    """Vet whose specialties were added out of alphabetical order."""
    vet = Vet(id=3, first_name="Linda", last_name="Douglas")
    vet.add_specialty(Specialty(id=2, name="surgery"))
    vet.add_specialty(Specialty(id=3, name="dentistry"))
    return vet


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """SQLite database file private to one test."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'petclinic.db'}")
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_manager(
    test_engine: AsyncEngine,
) -> AsyncGenerator[SessionManager, None]:
    """Session manager over a freshly created schema."""
    manager = SessionManager(test_engine)
    await manager.initialize_database(Base.metadata)
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def async_session(
    session_manager: SessionManager,
) -> AsyncGenerator[AsyncSession, None]:
    """Plain session; tests commit explicitly when they need to."""
    async with session_manager.get_session() as session:
        yield session
