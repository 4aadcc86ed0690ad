"""
Schema base classes shared by all bounded contexts.

The API speaks camelCase on the wire while Python code uses snake_case.
Requests accept either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
