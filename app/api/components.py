"""Component endpoints: list, CRUD, active-by-type, text search and stats."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.core.database import get_db
from app.models.component import Component
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.schemas.components import (
    ComponentCreate,
    ComponentListResponse,
    ComponentOut,
    ComponentStats,
    ComponentUpdate,
)
from app.services import components as component_service

router = APIRouter()


def component_out(component: Component) -> ComponentOut:
    return ComponentOut(
        id=component.id,
        name=component.name,
        type=component.type,
        description=component.description,
        styles=component.styles or {},
        code=component.code or {},
        examples=component.examples or [],
        tags=component.tags or [],
        status=component.status,
        version=component.version,
        dependencies=component.dependencies or [],
        created_by=component.created_by,
        created_at=component.created_at,
        updated_at=component.updated_at,
    )


@router.get("", response_model=ComponentListResponse)
def list_components(
    db: Annotated[Session, Depends(get_db)],
    type: str | None = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    tags: Annotated[str | None, Query(description="Comma-separated; matches any")] = None,
    search: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = 10,
    sort_by: Annotated[str, Query(alias="sortBy")] = "createdAt",
    sort_order: Annotated[str, Query(alias="sortOrder")] = "desc",
) -> ComponentListResponse:
    """List components filtered by type, status, tags (any of) and free text (ANDed)."""
    components, pagination = component_service.list_components(
        db,
        type=type,
        status=status_filter,
        tags=tags,
        search=search,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return ComponentListResponse(
        components=[component_out(c) for c in components],
        pagination=pagination,
    )


@router.get("/type/{component_type}", response_model=list[ComponentOut])
def list_by_type(
    component_type: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[ComponentOut]:
    """Active components of one type, newest first."""
    return [component_out(c) for c in component_service.list_active_by_type(db, component_type)]


@router.get("/search/{query}", response_model=list[ComponentOut])
def search(
    query: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[ComponentOut]:
    """Full-text search over name, description and tags, most relevant first."""
    return [component_out(c) for c in component_service.search_components(db, query)]


@router.get("/stats/overview", response_model=ComponentStats)
def stats_overview(
    db: Annotated[Session, Depends(get_db)],
) -> ComponentStats:
    return component_service.component_stats(db)


@router.get("/{component_id}", response_model=ComponentOut)
def get_component(
    component_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> ComponentOut:
    return component_out(component_service.get_component(db, component_id))


@router.post("", response_model=ComponentOut, status_code=status.HTTP_201_CREATED)
def create_component(
    body: ComponentCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ComponentOut:
    """Create a component. Any authenticated user; the name must not already exist."""
    return component_out(component_service.create_component(db, body, current_user))


@router.put("/{component_id}", response_model=ComponentOut)
def update_component(
    component_id: str,
    body: ComponentUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ComponentOut:
    """Replace the supplied top-level fields. Only the creator may update."""
    return component_out(
        component_service.update_component(db, component_id, body, current_user)
    )


@router.delete("/{component_id}", response_model=MessageResponse)
def delete_component(
    component_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Delete a component. Only the creator may delete."""
    component_service.delete_component(db, component_id, current_user)
    return MessageResponse(message="Component deleted successfully")
