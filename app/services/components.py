"""
Component service: listing with type/status/tag/text filters, CRUD, type and text lookups, stats.

Any authenticated user may create a component; only its creator may update or
delete it. Unlike design tokens, admins get no override here.
"""

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationError
from app.models.base import utcnow
from app.models.component import Component
from app.schemas.auth import CurrentUser
from app.schemas.components import ComponentCreate, ComponentPagination, ComponentStats, ComponentUpdate
from app.services.query import check_paging, dialect_name, order_by_clauses, page_count
from app.services.search import tags_match_any, text_match

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "name": Component.name,
    "type": Component.type,
    "description": Component.description,
    "status": Component.status,
    "version": Component.version,
    "createdAt": Component.created_at,
    "updatedAt": Component.updated_at,
}

# Nested fields are stored in their wire (camelCase) shape.
NESTED_FIELDS = frozenset({"styles", "code", "examples", "dependencies"})

# An explicit null on update empties a container field; status and version keep their value.
EMPTY_VALUES = {"styles": dict, "code": dict, "examples": list, "tags": list, "dependencies": list}
KEEP_WHEN_NULL = frozenset({"status", "version"})


def _get_or_404(db: Session, component_id: str) -> Component:
    component = db.get(Component, component_id)
    if component is None:
        raise NotFoundError("Component not found")
    return component


def _stored_value(body: ComponentCreate, name: str) -> Any:
    """Field value as persisted: nested models dumped by alias, omitting unset keys."""
    value = getattr(body, name)
    if value is None or name not in NESTED_FIELDS:
        return value
    if isinstance(value, list):
        return [item.model_dump(by_alias=True, exclude_none=True) for item in value]
    return value.model_dump(by_alias=True, exclude_none=True)


def _name_taken(db: Session, name: str, exclude_id: str | None = None) -> bool:
    query = db.query(Component.id).filter(Component.name == name)
    if exclude_id is not None:
        query = query.filter(Component.id != exclude_id)
    return query.first() is not None


def parse_tags(tags: str | None) -> list[str]:
    """'a, b,,c' -> ['a', 'b', 'c']"""
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


def list_components(
    db: Session,
    *,
    type: str | None = None,
    status: str | None = None,
    tags: str | None = None,
    search: str | None = None,
    page: int = 1,
    limit: int = 10,
    sort_by: str = "createdAt",
    sort_order: str = "desc",
) -> tuple[list[Component], ComponentPagination]:
    """
    Return one page of components plus pagination.

    tags is comma-separated and matches components carrying any of them; search
    is ANDed with the other filters. pagination.total counts the whole filter.
    """
    check_paging(page, limit)
    order = order_by_clauses(SORTABLE_FIELDS, Component.id, sort_by, sort_order)
    dialect = dialect_name(db)

    filters = []
    if type:
        filters.append(Component.type == type)
    if status:
        filters.append(Component.status == status)
    tag_list = parse_tags(tags)
    if tag_list:
        filters.append(tags_match_any(Component.tags, tag_list, dialect))
    if search:
        clause, _ = text_match(Component.search_document, search, dialect)
        filters.append(clause)

    total = db.query(func.count(Component.id)).filter(*filters).scalar() or 0
    components = (
        db.query(Component)
        .filter(*filters)
        .order_by(*order)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    pagination = ComponentPagination(
        current=page,
        page=page,
        limit=limit,
        pages=page_count(total, limit),
        total=total,
    )
    return components, pagination


def get_component(db: Session, component_id: str) -> Component:
    # Any id string is looked up as-is; a malformed id is simply not found.
    return _get_or_404(db, component_id)


def create_component(db: Session, body: ComponentCreate, user: CurrentUser) -> Component:
    if not body.name or not body.type:
        raise ValidationError("Name and type are required")
    if _name_taken(db, body.name):
        raise ConflictError("Component with this name already exists")

    now = utcnow()
    component = Component(
        name=body.name,
        type=body.type,
        description=body.description,
        styles=_stored_value(body, "styles") or {},
        code=_stored_value(body, "code") or {},
        examples=_stored_value(body, "examples") or [],
        tags=list(body.tags or []),
        status=body.status or "draft",
        version=body.version or "1.0.0",
        dependencies=_stored_value(body, "dependencies") or [],
        created_by=user.id,
        created_at=now,
        updated_at=now,
    )
    component.refresh_search_document()
    db.add(component)
    db.commit()
    db.refresh(component)
    logger.info("Component created", extra={"component_id": component.id, "user_id": user.id})
    return component


def _ensure_creator(component: Component, user: CurrentUser, action: str) -> None:
    if component.created_by != user.id:
        raise PermissionDeniedError(f"Not authorized to {action} this component")


def update_component(
    db: Session,
    component_id: str,
    body: ComponentUpdate,
    user: CurrentUser,
) -> Component:
    """Replace every supplied top-level field; nested objects are replaced, not merged."""
    component = _get_or_404(db, component_id)
    _ensure_creator(component, user, "update")

    supplied = body.model_fields_set
    for required in ("name", "type"):
        if required in supplied and not getattr(body, required):
            raise ValidationError("Name and type cannot be empty")
    if "name" in supplied and body.name != component.name and _name_taken(db, body.name, component.id):
        raise ConflictError("Component with this name already exists")

    for name in supplied:
        value = _stored_value(body, name)
        if value is None:
            if name in KEEP_WHEN_NULL:
                continue
            if name in EMPTY_VALUES:
                value = EMPTY_VALUES[name]()
        setattr(component, name, value)
    component.updated_at = utcnow()
    component.refresh_search_document()

    db.commit()
    db.refresh(component)
    logger.info(
        "Component updated",
        extra={"component_id": component.id, "user_id": user.id, "fields": sorted(supplied)},
    )
    return component


def delete_component(db: Session, component_id: str, user: CurrentUser) -> None:
    component = _get_or_404(db, component_id)
    _ensure_creator(component, user, "delete")
    db.delete(component)
    db.commit()
    logger.info("Component deleted", extra={"component_id": component_id, "user_id": user.id})


def list_active_by_type(db: Session, component_type: str) -> list[Component]:
    """Active components of one type, newest first."""
    return (
        db.query(Component)
        .filter(Component.type == component_type, Component.status == "active")
        .order_by(Component.created_at.desc(), Component.id.desc())
        .all()
    )


def search_components(db: Session, query: str) -> list[Component]:
    """Components matching any word of ``query``, most relevant first."""
    clause, relevance = text_match(Component.search_document, query, dialect_name(db))
    return (
        db.query(Component)
        .filter(clause)
        .order_by(relevance.desc(), Component.created_at.desc(), Component.id.desc())
        .all()
    )


def component_stats(db: Session) -> ComponentStats:
    """Total count plus per-type and per-status breakdowns."""
    total = db.query(func.count(Component.id)).scalar() or 0
    by_type = db.query(Component.type, func.count(Component.id)).group_by(Component.type).all()
    by_status = db.query(Component.status, func.count(Component.id)).group_by(Component.status).all()
    return ComponentStats(
        total=total,
        type_counts={t: n for t, n in by_type},
        status_counts={s: n for s, n in by_status},
    )
