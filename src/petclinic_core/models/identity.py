"""
Entity identity states.

An entity is either ``Unsaved`` (no surrogate id has been assigned by the
persistence layer yet) or ``Persisted`` with the id it was stored under.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Unsaved:
    """Identity of an entity that has not been stored yet."""

    def __str__(self) -> str:
        return "unsaved"


@dataclass(frozen=True)
class Persisted:
    """Identity of an entity stored under a surrogate id."""

    id: int

    def __str__(self) -> str:
        return f"persisted({self.id})"


EntityIdentity = Union[Unsaved, Persisted]

UNSAVED = Unsaved()


def identity_of(entity_id: Optional[int]) -> EntityIdentity:
    """Map a nullable surrogate id to its identity state."""
    if entity_id is None:
        return UNSAVED
    return Persisted(entity_id)
