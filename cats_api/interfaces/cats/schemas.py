"""
Pydantic schemas for cats API request/response validation.

Structural checks only (types, lengths, non-negative age). Catalog rules
such as the maximum age and unique names are enforced by the use cases.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cats_api.interfaces.schemas import CamelModel

NAME_MAX_LEN = 100
DESCRIPTION_MAX_LEN = 500


class CreateCatRequest(CamelModel):
    """Request schema for creating a cat."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    age: int = Field(..., ge=0, description="Age in years")
    breed: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LEN)


class UpdateCatRequest(CamelModel):
    """Request schema for a partial update. Omitted fields stay unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    age: Optional[int] = Field(default=None, ge=0)
    breed: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LEN)


class CatResponse(CamelModel):
    """A cat as returned by the API."""

    id: int
    name: str
    age: int
    breed: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class RemovedResponse(CamelModel):
    message: str
