"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the storage contract every entity-specific
repository extends.  Service-layer code depends on this abstraction, never
on the Django ORM directly.

All look-ups are keyed by the integer primary key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Product``).
    """

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or update) an entity and return it."""

    @abstractmethod
    def delete(self, id: int) -> None:
        """Remove the entity with the given primary key."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return ``True`` if an entity with the given primary key is stored."""
