"""
Design token service: filtered/paginated listing, text search and mutations.

Role and ownership rules:
  - create, bulk upload and delete are admin-only (enforced by the route dependency)
  - update is allowed to the token's creator or any admin
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import (
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    describe_validation_errors,
)
from app.models.base import is_object_id, utcnow
from app.models.design_token import DesignToken
from app.schemas.auth import CurrentUser
from app.schemas.common import Pagination
from app.schemas.tokens import DesignTokenCreate, DesignTokenUpdate
from app.services.query import check_paging, dialect_name, order_by_clauses, page_count
from app.services.search import text_match

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "name": DesignToken.name,
    "category": DesignToken.category,
    "value": DesignToken.value,
    "description": DesignToken.description,
    "theme": DesignToken.theme,
    "lightValue": DesignToken.light_value,
    "darkValue": DesignToken.dark_value,
    "status": DesignToken.status,
    "createdAt": DesignToken.created_at,
    "updatedAt": DesignToken.updated_at,
}

# Supplied as "" or null these keep the stored value; the rest are overwritten when present.
KEEP_WHEN_EMPTY = frozenset({"name", "category", "value", "tags", "theme", "status"})

REQUIRED_FIELDS_MESSAGE = "Name, category, and value are required"


@dataclass
class BulkUploadOutcome:
    """Per-index results of a bulk upload, in input order within each bucket."""

    success: list[tuple[int, DesignToken]] = field(default_factory=list)
    skipped: list[tuple[int, Any, str]] = field(default_factory=list)
    errors: list[tuple[int, Any, str]] = field(default_factory=list)

    @property
    def message(self) -> str:
        return (
            f"Upload complete. {len(self.success)} created, "
            f"{len(self.skipped)} skipped, {len(self.errors)} errors"
        )


def _require_token_id(token_id: str) -> None:
    if not is_object_id(token_id):
        raise ValidationError("Invalid token ID format")


def _get_or_404(db: Session, token_id: str) -> DesignToken:
    token = db.get(DesignToken, token_id)
    if token is None:
        raise NotFoundError("Design token not found")
    return token


def _new_token(body: DesignTokenCreate, user_id: str) -> DesignToken:
    now = utcnow()
    token = DesignToken(
        name=body.name,
        category=body.category,
        value=body.value,
        description=body.description,
        tags=list(body.tags or []),
        theme=body.theme or "all",
        light_value=body.light_value or "",
        dark_value=body.dark_value or "",
        status=body.status or "active",
        created_by=user_id,
        created_at=now,
        updated_at=now,
    )
    token.refresh_search_document()
    return token


def list_tokens(
    db: Session,
    *,
    category: str | None = None,
    search: str | None = None,
    page: int = 1,
    limit: int = 20,
    sort_by: str = "createdAt",
    sort_order: str = "desc",
) -> tuple[list[DesignToken], Pagination]:
    """
    Return one page of tokens plus pagination.

    category is an exact match; search is a case-insensitive word search over
    name, description and tags. pagination.total ignores page and limit.
    """
    check_paging(page, limit)
    order = order_by_clauses(SORTABLE_FIELDS, DesignToken.id, sort_by, sort_order)

    filters = []
    if category:
        filters.append(DesignToken.category == category)
    if search:
        clause, _ = text_match(DesignToken.search_document, search, dialect_name(db))
        filters.append(clause)

    total = db.query(func.count(DesignToken.id)).filter(*filters).scalar() or 0
    tokens = (
        db.query(DesignToken)
        .filter(*filters)
        .order_by(*order)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return tokens, Pagination(current=page, pages=page_count(total, limit), total=total)


def get_token(db: Session, token_id: str) -> DesignToken:
    _require_token_id(token_id)
    return _get_or_404(db, token_id)


def create_token(db: Session, body: DesignTokenCreate, user: CurrentUser) -> DesignToken:
    if not body.name or not body.category or not body.value:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    if not is_object_id(user.id):
        logger.error("Invalid user ID format on token create", extra={"user_id": user.id})
        raise AuthenticationError("Invalid user authentication - please log in again")

    token = _new_token(body, user.id)
    db.add(token)
    db.commit()
    db.refresh(token)
    logger.info("Design token created", extra={"token_id": token.id, "user_id": user.id})
    return token


def update_token(
    db: Session,
    token_id: str,
    body: DesignTokenUpdate,
    user: CurrentUser,
) -> DesignToken:
    """Apply the fields present in ``body`` to the token. Creator or admin only."""
    _require_token_id(token_id)
    token = _get_or_404(db, token_id)
    if token.created_by != user.id and user.role != "admin":
        raise PermissionDeniedError("Permission denied")

    changes = body.model_dump(exclude_unset=True)
    for name, value in changes.items():
        if name in KEEP_WHEN_EMPTY and (value is None or value == ""):
            continue
        setattr(token, name, value)
    token.updated_at = utcnow()
    token.refresh_search_document()

    db.commit()
    db.refresh(token)
    logger.info(
        "Design token updated",
        extra={"token_id": token.id, "user_id": user.id, "fields": sorted(changes)},
    )
    return token


def delete_token(db: Session, token_id: str) -> None:
    _require_token_id(token_id)
    token = _get_or_404(db, token_id)
    db.delete(token)
    db.commit()
    logger.info("Design token deleted", extra={"token_id": token_id})


def bulk_upload(db: Session, items: Any, user: CurrentUser) -> BulkUploadOutcome:
    """
    Create tokens from a list of raw objects, one commit per item.

    Invalid items go to ``errors``, names that already exist go to ``skipped``;
    neither stops the remaining items from being processed.
    """
    if not isinstance(items, list):
        raise ValidationError('Invalid format. Expected { "tokens": [...] }')

    outcome = BulkUploadOutcome()
    for index, data in enumerate(items):
        if not isinstance(data, dict):
            outcome.errors.append((index, data, "Token entry must be an object"))
            continue
        try:
            body = DesignTokenCreate.model_validate(data)
        except PydanticValidationError as e:
            outcome.errors.append((index, data, describe_validation_errors(e.errors())))
            continue
        if not body.name or not body.category or not body.value:
            outcome.errors.append((index, data, "Missing required fields: name, category, value"))
            continue

        exists = db.query(DesignToken.id).filter(DesignToken.name == body.name).first()
        if exists is not None:
            outcome.skipped.append((index, data, f"Token '{body.name}' already exists"))
            continue

        token = _new_token(body, user.id)
        db.add(token)
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning("Bulk upload item failed", extra={"index": index, "reason": str(e)[:500]})
            outcome.errors.append((index, data, str(e)))
            continue
        db.refresh(token)
        outcome.success.append((index, token))

    logger.info(
        "Bulk upload completed",
        extra={
            "user_id": user.id,
            "created_count": len(outcome.success),
            "skipped_count": len(outcome.skipped),
            "error_count": len(outcome.errors),
        },
    )
    return outcome
