"""
Pet photo validation and storage.

``PhotoValidator`` decides whether an uploaded blob is acceptable and picks
a fresh, collision-free name for it. ``PetPhotoStorage`` writes accepted
photos to the upload directory and removes replaced ones.

Stored names keep the extension exactly as the client sent it, so
``Rex.JPG`` is stored as ``<uuid>.JPG``; only the allow-list check is
case-insensitive.
"""

import logging
import uuid
from pathlib import Path, PureWindowsPath
from typing import FrozenSet, Iterable, Optional, Union

from ..exceptions import (
    FileTooLargeException,
    InvalidFilenameException,
    UnsupportedFileTypeException,
)
from ..models.pet import DEFAULT_PET_PHOTO
from ..utils.config import MAX_PHOTO_SIZE, PetClinicSettings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS: FrozenSet[str] = frozenset({"jpg", "jpeg", "png", "gif"})


def clean_filename(filename: str) -> str:
    """Strip any client-side directory components from an upload filename."""
    # PureWindowsPath splits on both "/" and "\"
    return PureWindowsPath(filename).name


def get_file_extension(filename: str) -> str:
    """
    Extract the extension after the last dot, without the dot.

    Returns an empty string when there is no dot or the name ends with one.
    """
    _, dot, extension = filename.rpartition(".")
    if not dot:
        return ""
    return extension


def format_size(size: int) -> str:
    """Render a byte count as whole megabytes, or bytes below 1MB."""
    if size < 1024 * 1024:
        return f"{size} bytes"
    return f"{size // (1024 * 1024)}MB"


class PhotoValidator:
    """Validates uploaded pet photos and generates their storage names."""

    def __init__(
        self,
        max_size: int = MAX_PHOTO_SIZE,
        allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
    ):
        self.max_size = max_size
        self.allowed_extensions = frozenset(ext.lower() for ext in allowed_extensions)

    def validate_and_name(
        self,
        content: bytes,
        original_filename: Optional[str],
        declared_size: int,
    ) -> Optional[str]:
        """
        Validate an upload and return the name it should be stored under.

        Checks run in a fixed order: empty upload, size, filename, extension.

        Args:
            content: Uploaded bytes (not inspected, only persisted later)
            original_filename: Filename the client sent
            declared_size: Size of the upload in bytes

        Returns:
            A new ``<uuid>.<ext>`` filename, or None when the upload is empty
            and no photo was requested

        Raises:
            FileTooLargeException: If declared_size exceeds the limit
            InvalidFilenameException: If original_filename is None or empty
            UnsupportedFileTypeException: If the extension is missing or not allowed
        """
        if declared_size == 0:
            return None

        if declared_size > self.max_size:
            raise FileTooLargeException(
                f"File size exceeds maximum limit of {format_size(self.max_size)}",
                size=declared_size,
                max_size=self.max_size,
                filename=original_filename,
            )

        if not original_filename:
            raise InvalidFilenameException()

        filename = clean_filename(original_filename)
        extension = get_file_extension(filename)

        if extension.lower() not in self.allowed_extensions:
            raise UnsupportedFileTypeException(
                "File type not supported. Please upload JPG, PNG, or GIF files only.",
                extension=extension,
                allowed_extensions=sorted(self.allowed_extensions),
                filename=original_filename,
            )

        return f"{uuid.uuid4()}.{extension}"


class PetPhotoStorage:
    """Stores validated pet photos in a directory on local disk."""

    def __init__(
        self,
        upload_dir: Union[str, Path],
        validator: Optional[PhotoValidator] = None,
    ):
        self.upload_dir = Path(upload_dir)
        self.validator = validator or PhotoValidator()

    @classmethod
    def from_settings(cls, settings: PetClinicSettings) -> "PetPhotoStorage":
        """Create storage using the configured directory and size limit."""
        return cls(
            settings.photo_upload_dir,
            PhotoValidator(max_size=settings.max_photo_size),
        )

    def path_for(self, filename: str) -> Path:
        """Location of a stored photo."""
        return self.upload_dir / filename

    def upload_photo(
        self,
        content: bytes,
        original_filename: Optional[str],
        declared_size: int,
    ) -> Optional[str]:
        """
        Validate and store an uploaded photo.

        Returns:
            The generated filename, or None if the upload was empty

        Raises:
            PhotoUploadException: If validation fails; nothing is written
            OSError: If the file cannot be written
        """
        filename = self.validator.validate_and_name(
            content, original_filename, declared_size
        )
        if filename is None:
            return None

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self.path_for(filename).write_bytes(content)
        logger.info(f"Stored pet photo {filename} ({declared_size} bytes)")
        return filename

    def delete_photo(self, filename: Optional[str]) -> None:
        """
        Remove a stored photo.

        Does nothing for None or the default placeholder, and tolerates a
        file that is already gone. Failures are logged rather than raised.
        """
        if not filename or filename == DEFAULT_PET_PHOTO:
            return

        try:
            self.path_for(clean_filename(filename)).unlink(missing_ok=True)
            logger.debug(f"Deleted pet photo {filename}")
        except OSError as e:
            logger.warning(f"Failed to delete photo file: {filename} - {e}")
