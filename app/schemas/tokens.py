"""Request/response schemas for design token endpoints."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from app.schemas.common import ApiModel, Pagination

TokenTheme = Literal["light", "dark", "all"]
TokenStatus = Literal["active", "draft", "deprecated"]


class DesignTokenCreate(ApiModel):
    """
    Body for POST /tokens and for each item of a bulk upload.

    name, category and value are optional here so that a missing field is
    reported as a 400 with a single message by the service.
    """

    name: str | None = None
    category: str | None = None
    value: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    theme: TokenTheme | None = None
    light_value: str | None = None
    dark_value: str | None = None
    status: TokenStatus | None = None


class DesignTokenUpdate(ApiModel):
    """Partial update; only keys present in the request body are applied."""

    name: str | None = None
    category: str | None = None
    value: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    theme: TokenTheme | None = None
    light_value: str | None = None
    dark_value: str | None = None
    status: TokenStatus | None = None


class BulkUploadRequest(ApiModel):
    # Shape of the list is checked by the service so a bad payload gets one clear message.
    tokens: Any = None


class CreatorSummary(ApiModel):
    id: str
    username: str


class CreatorDetail(CreatorSummary):
    email: str


class DesignTokenOut(ApiModel):
    id: str
    name: str
    category: str
    value: str
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    theme: TokenTheme
    light_value: str | None = None
    dark_value: str | None = None
    status: TokenStatus
    created_by: CreatorSummary
    created_at: datetime
    updated_at: datetime


class DesignTokenDetail(DesignTokenOut):
    created_by: CreatorDetail


class DesignTokenListResponse(ApiModel):
    tokens: list[DesignTokenOut]
    pagination: Pagination


class BulkUploadSuccess(ApiModel):
    index: int
    token: DesignTokenOut


class BulkUploadSkip(ApiModel):
    index: int
    data: Any
    reason: str


class BulkUploadFailure(ApiModel):
    index: int
    data: Any
    error: str


class BulkUploadResults(ApiModel):
    success: list[BulkUploadSuccess] = Field(default_factory=list)
    skipped: list[BulkUploadSkip] = Field(default_factory=list)
    errors: list[BulkUploadFailure] = Field(default_factory=list)


class BulkUploadResponse(ApiModel):
    message: str
    results: BulkUploadResults
