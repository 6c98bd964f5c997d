"""
Clinic workflows built on the owner aggregate.

These functions turn validated input schemas into aggregate mutations. They
never touch the database; the caller saves the owner afterwards.
"""

import logging
from typing import Optional

from ..exceptions import BusinessRuleException, InvalidArgumentException
from ..models import Owner, Pet, PetType, Visit
from ..schemas import PetCreate, PetUpdate, VisitCreate
from .photos import PetPhotoStorage

logger = logging.getLogger(__name__)


def _duplicate_name(name: str) -> BusinessRuleException:
    return BusinessRuleException(
        f"Pet name '{name}' is already in use",
        rule_name="duplicate_pet_name",
        context={"name": name},
    )


def register_pet(owner: Owner, data: PetCreate, pet_type: Optional[PetType]) -> Pet:
    """
    Create a pet from validated input and add it to the owner's catalog.

    Only stored pets count as duplicates, so an owner may add several new
    pets in one request before any of them is saved.

    Args:
        owner: Owner receiving the pet
        data: Validated pet input
        pet_type: Pet type resolved from ``data.type_id``

    Returns:
        The new, unsaved pet

    Raises:
        InvalidArgumentException: If the pet type could not be resolved
        BusinessRuleException: If a stored pet of the owner has the same name
    """
    if pet_type is None:
        raise InvalidArgumentException(
            "Pet type is required", argument="type_id", value=data.type_id
        )

    if owner.get_pet_by_name(data.name, ignore_new=True) is not None:
        raise _duplicate_name(data.name)

    pet = Pet(name=data.name, birth_date=data.birth_date, type=pet_type)
    owner.add_pet(pet)
    logger.debug(f"Registered pet '{pet.name}' for owner {owner.identity}")
    return pet


def update_pet(
    owner: Owner,
    pet_id: int,
    data: PetUpdate,
    pet_type: Optional[PetType] = None,
) -> Pet:
    """
    Apply validated edits to one of the owner's stored pets.

    The name is rejected when the first pet carrying it is a different pet.

    Raises:
        InvalidArgumentException: If the owner has no pet with ``pet_id``
        BusinessRuleException: If another pet already uses the new name
    """
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        raise InvalidArgumentException("No such pet", argument="pet_id", value=pet_id)

    existing = owner.get_pet_by_name(data.name)
    if existing is not None and existing is not pet:
        raise _duplicate_name(data.name)

    pet.name = data.name
    pet.birth_date = data.birth_date
    if pet_type is not None:
        pet.type = pet_type
    return pet


def record_visit(owner: Owner, pet_id: Optional[int], data: VisitCreate) -> Visit:
    """
    Build a visit from validated input and attach it through the aggregate.

    Raises:
        InvalidArgumentException: If ``pet_id`` is None or unknown to the owner
    """
    visit = Visit(visit_date=data.visit_date, description=data.description)
    owner.add_visit(pet_id, visit)
    return visit


def change_pet_photo(
    pet: Pet,
    storage: PetPhotoStorage,
    content: bytes,
    original_filename: Optional[str],
    declared_size: int,
) -> Optional[str]:
    """
    Replace a pet's photo with a new upload.

    An empty upload leaves the pet untouched. The previous photo is removed
    only after the new one has been stored.

    Returns:
        The new stored filename, or None for an empty upload

    Raises:
        PhotoUploadException: If the upload is rejected
    """
    filename = storage.upload_photo(content, original_filename, declared_size)
    if filename is None:
        return None

    previous = pet.photo_filename
    pet.photo_filename = filename
    storage.delete_photo(previous)
    return filename
