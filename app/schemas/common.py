"""Shared schema base and pagination/message bodies."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for API bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(BaseModel):
    """Offset pagination summary; pages = ceil(total / limit)."""

    current: int = Field(..., ge=1, description="Requested page (1-based)")
    pages: int = Field(..., ge=0, description="Number of pages for the filter")
    total: int = Field(..., ge=0, description="Documents matching the filter, ignoring page/limit")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str
