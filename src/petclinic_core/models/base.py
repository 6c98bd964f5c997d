"""
Base model classes for all SQLAlchemy models in the petclinic-core package.

This module provides the foundational base classes that every entity inherits
from: an integer surrogate key assigned by the database, an explicit identity
state derived from it, and common utility methods.

Example:
    >>> from petclinic_core.models import Owner
    >>> owner = Owner(first_name="George", last_name="Franklin")
    >>> owner.is_new
    True
    >>> owner.identity
    Unsaved()
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .identity import EntityIdentity, identity_of


class Base(DeclarativeBase):
    """Base declarative class for all SQLAlchemy models."""


class BaseModel(Base):
    """
    Abstract base model providing the surrogate key and identity helpers.

    The ``id`` column stays ``None`` until the persistence layer flushes the
    entity; ``identity`` turns that nullable value into an explicit
    ``Unsaved`` / ``Persisted(id)`` state so callers never compare against
    ``None`` themselves.

    Attributes:
        id (int): Primary key, assigned by the database on insert
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """
        Return string representation of the model instance.

        Returns:
            String in format: <ModelName(id=...)>
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    @property
    def identity(self) -> EntityIdentity:
        """Identity state of this entity."""
        return identity_of(self.id)

    @property
    def is_new(self) -> bool:
        """True if the entity has not been stored yet."""
        return self.id is None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model instance to dictionary representation.

        Dates and datetimes are converted to ISO format strings; other column
        values are returned unchanged.

        Returns:
            Dictionary with column names as keys and serialized values.
        """
        result: Dict[str, Any] = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, (date, datetime)):
                result[column.key] = value.isoformat()
            else:
                result[column.key] = value
        return result

    @classmethod
    def get_table_name(cls) -> str:
        """Get the database table name for this model."""
        return cls.__tablename__

    def update_fields(self, **kwargs: Any) -> None:
        """
        Update multiple fields on the model instance in a single operation.

        Args:
            **kwargs: Field names as keys and new values as values.
                     Only existing model attributes can be updated.

        Raises:
            AttributeError: If any field name doesn't exist on the model.

        Note:
            This method only modifies the instance. The caller is responsible
            for flushing the change to the database.
        """
        for field, value in kwargs.items():
            if not hasattr(self, field):
                raise AttributeError(
                    f"'{self.__class__.__name__}' has no attribute '{field}'"
                )
        for field, value in kwargs.items():
            setattr(self, field, value)


class NamedModel(BaseModel):
    """Abstract base for simple value objects identified by a name."""

    __abstract__ = True

    name: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)

    def __str__(self) -> str:
        return self.name or ""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id}, name='{self.name}')>"
