"""Design token endpoints: list/search, get, create, bulk upload, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.auth import get_current_user, require_admin
from app.core.database import get_db
from app.models.design_token import DesignToken
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.schemas.tokens import (
    BulkUploadFailure,
    BulkUploadRequest,
    BulkUploadResponse,
    BulkUploadResults,
    BulkUploadSkip,
    BulkUploadSuccess,
    CreatorDetail,
    CreatorSummary,
    DesignTokenCreate,
    DesignTokenDetail,
    DesignTokenListResponse,
    DesignTokenOut,
    DesignTokenUpdate,
)
from app.services import tokens as token_service

router = APIRouter()


def token_out(token: DesignToken) -> DesignTokenOut:
    """Token with its creator's username joined in."""
    return DesignTokenOut(
        id=token.id,
        name=token.name,
        category=token.category,
        value=token.value,
        description=token.description,
        tags=token.tags or [],
        theme=token.theme,
        light_value=token.light_value,
        dark_value=token.dark_value,
        status=token.status,
        created_by=CreatorSummary(id=token.creator.id, username=token.creator.username),
        created_at=token.created_at,
        updated_at=token.updated_at,
    )


def token_detail(token: DesignToken) -> DesignTokenDetail:
    """Token with creator username and email joined in."""
    summary = token_out(token)
    return DesignTokenDetail(
        **summary.model_dump(exclude={"created_by"}),
        created_by=CreatorDetail(
            id=token.creator.id,
            username=token.creator.username,
            email=token.creator.email,
        ),
    )


@router.get("", response_model=DesignTokenListResponse)
def list_tokens(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    category: str | None = None,
    search: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = 20,
    sort_by: Annotated[str, Query(alias="sortBy")] = "createdAt",
    sort_order: Annotated[str, Query(alias="sortOrder")] = "desc",
) -> DesignTokenListResponse:
    """
    List tokens, newest first by default.

    category is an exact match; search is a case-insensitive word search over
    name, description and tags.
    """
    tokens, pagination = token_service.list_tokens(
        db,
        category=category,
        search=search,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return DesignTokenListResponse(tokens=[token_out(t) for t in tokens], pagination=pagination)


@router.post("/upload", response_model=BulkUploadResponse, status_code=status.HTTP_201_CREATED)
def upload_tokens(
    body: BulkUploadRequest,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> BulkUploadResponse:
    """
    Create many tokens from { "tokens": [...] } (admin only).

    Every entry is processed on its own and reported by input index under
    success, skipped (name already exists) or errors.
    """
    outcome = token_service.bulk_upload(db, body.tokens, admin)
    results = BulkUploadResults(
        success=[BulkUploadSuccess(index=i, token=token_out(t)) for i, t in outcome.success],
        skipped=[BulkUploadSkip(index=i, data=d, reason=r) for i, d, r in outcome.skipped],
        errors=[BulkUploadFailure(index=i, data=d, error=e) for i, d, e in outcome.errors],
    )
    return BulkUploadResponse(message=outcome.message, results=results)


@router.get("/{token_id}", response_model=DesignTokenDetail)
def get_token(
    token_id: str,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DesignTokenDetail:
    return token_detail(token_service.get_token(db, token_id))


@router.post("", response_model=DesignTokenOut, status_code=status.HTTP_201_CREATED)
def create_token(
    body: DesignTokenCreate,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> DesignTokenOut:
    """Create a token (admin only). tags default to [], theme to 'all', status to 'active'."""
    return token_out(token_service.create_token(db, body, admin))


@router.put("/{token_id}", response_model=DesignTokenOut)
def update_token(
    token_id: str,
    body: DesignTokenUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DesignTokenOut:
    """Update the supplied fields of a token. Allowed to its creator or any admin."""
    return token_out(token_service.update_token(db, token_id, body, current_user))


@router.delete("/{token_id}", response_model=MessageResponse)
def delete_token(
    token_id: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    """Delete a token (admin only)."""
    token_service.delete_token(db, token_id)
    return MessageResponse(message="Design token deleted successfully")
