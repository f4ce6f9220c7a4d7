"""Base classes for domain entities and value objects."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True)


class Entity(BaseModel):
    """Base class for entities (have identity, compared by id)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id)


class DomainService(ABC):
    """Base class for domain services (business logic that doesn't belong to a single entity)."""


class KeyValueStore(ABC):
    """Persistence port: a flat string-to-string store."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
