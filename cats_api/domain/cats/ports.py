"""
Port interfaces (ABCs) for the cats bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from cats_api.domain.cats.entities import Cat, NewCat


class CatRepository(ABC):
    """Port for persisting and querying cats."""

    @abstractmethod
    def list_page(self, offset: int, limit: int) -> list[Cat]:
        """Return cats ordered by ID, skipping ``offset`` rows."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the total number of cats."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, cat_id: int) -> Optional[Cat]:
        """Return the cat with this ID, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Cat]:
        """Return the cat with this exact name, or None."""
        raise NotImplementedError

    @abstractmethod
    def add(self, cat: NewCat) -> Cat:
        """Persist a new cat and return it with its ID and timestamps."""
        raise NotImplementedError

    @abstractmethod
    def update(self, cat_id: int, changes: dict[str, Any]) -> Optional[Cat]:
        """Apply field changes. Returns None if the cat does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, cat_id: int) -> bool:
        """Delete a cat. Returns False if it did not exist."""
        raise NotImplementedError
