"""
Domain entities for the cats bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Cat:
    """A cat in the catalog.

    ``internal_notes`` is staff-only data and is never exposed by the API.
    """

    id: int
    name: str
    age: int
    breed: str
    description: Optional[str]
    internal_notes: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewCat:
    """Field values for a cat that has not been persisted yet."""

    name: str
    age: int
    breed: str
    description: Optional[str] = None
    internal_notes: Optional[str] = None
