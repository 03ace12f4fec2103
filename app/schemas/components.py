"""Request/response schemas for component endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.common import ApiModel, Pagination

ComponentType = Literal[
    "button",
    "input",
    "card",
    "modal",
    "navigation",
    "form",
    "layout",
    "typography",
    "icon",
    "other",
]
ComponentStatus = Literal["draft", "active", "deprecated"]


class ComponentStyles(ApiModel):
    css: str | None = None
    scss: str | None = None
    css_in_js: str | None = None


class ComponentCode(ApiModel):
    html: str | None = None
    react: str | None = None
    vue: str | None = None
    angular: str | None = None


class ComponentExample(ApiModel):
    name: str | None = None
    description: str | None = None
    code: str | None = None
    preview: str | None = None


class ComponentDependency(ApiModel):
    name: str | None = None
    version: str | None = None


class ComponentCreate(ApiModel):
    """Body for POST /components. name and type presence is checked by the service."""

    name: str | None = None
    type: ComponentType | None = None
    description: str | None = None
    styles: ComponentStyles | None = None
    code: ComponentCode | None = None
    examples: list[ComponentExample] | None = None
    tags: list[str] | None = None
    status: ComponentStatus | None = None
    version: str | None = None
    dependencies: list[ComponentDependency] | None = None


class ComponentUpdate(ComponentCreate):
    """Partial update; supplied top-level fields replace stored ones (no deep merge)."""


class ComponentOut(ApiModel):
    id: str
    name: str
    type: ComponentType
    description: str | None = None
    styles: ComponentStyles = Field(default_factory=ComponentStyles)
    code: ComponentCode = Field(default_factory=ComponentCode)
    examples: list[ComponentExample] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    status: ComponentStatus
    version: str
    dependencies: list[ComponentDependency] = Field(default_factory=list)
    created_by: str
    created_at: datetime
    updated_at: datetime


class ComponentPagination(Pagination):
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)


class ComponentListResponse(ApiModel):
    components: list[ComponentOut]
    pagination: ComponentPagination


class ComponentStats(ApiModel):
    total: int = 0
    type_counts: dict[str, int] = Field(default_factory=dict)
    status_counts: dict[str, int] = Field(default_factory=dict)
