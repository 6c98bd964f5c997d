"""
Clinic services.

Photo validation and storage, and the workflows that apply validated input
to the owner aggregate.
"""

from .clinic import change_pet_photo, record_visit, register_pet, update_pet
from .photos import (
    ALLOWED_EXTENSIONS,
    PetPhotoStorage,
    PhotoValidator,
    clean_filename,
    get_file_extension,
)

__all__ = [
    "ALLOWED_EXTENSIONS",
    "PhotoValidator",
    "PetPhotoStorage",
    "clean_filename",
    "get_file_extension",
    "register_pet",
    "update_pet",
    "record_visit",
    "change_pet_photo",
]
