"""
Data Transfer Objects for the cats application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from cats_api.domain.cats.entities import Cat


@dataclass(frozen=True)
class CreateCatCommand:
    """Input DTO for creating a cat."""

    name: str
    age: int
    breed: str
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdateCatCommand:
    """Input DTO for a partial update.

    Attributes:
        cat_id: ID of the cat to update.
        changes: Only the fields the caller sent, keyed by field name.
    """

    cat_id: int
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ListCatsQuery:
    """Input DTO for a page of cats (1-based page number)."""

    page: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class CatResult:
    """Output DTO for a cat. Internal notes are not carried."""

    id: int
    name: str
    age: int
    breed: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, cat: Cat) -> "CatResult":
        return cls(
            id=cat.id,
            name=cat.name,
            age=cat.age,
            breed=cat.breed,
            description=cat.description,
            created_at=cat.created_at,
            updated_at=cat.updated_at,
        )


@dataclass(frozen=True)
class CatPageResult:
    """Output DTO for one page of cats."""

    items: list[CatResult]
    page: int
    page_size: int
    total: int
