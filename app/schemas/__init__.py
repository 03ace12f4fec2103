"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    UserPublic,
    UserResponse,
    VerifyResponse,
)
from app.schemas.common import ErrorResponse, MessageResponse, Pagination
from app.schemas.components import (
    ComponentCreate,
    ComponentListResponse,
    ComponentOut,
    ComponentStats,
    ComponentUpdate,
)
from app.schemas.health import HealthResponse
from app.schemas.tokens import (
    BulkUploadRequest,
    BulkUploadResponse,
    DesignTokenCreate,
    DesignTokenDetail,
    DesignTokenListResponse,
    DesignTokenOut,
    DesignTokenUpdate,
)

__all__ = [
    "AuthResponse",
    "BulkUploadRequest",
    "BulkUploadResponse",
    "ComponentCreate",
    "ComponentListResponse",
    "ComponentOut",
    "ComponentStats",
    "ComponentUpdate",
    "CurrentUser",
    "DesignTokenCreate",
    "DesignTokenDetail",
    "DesignTokenListResponse",
    "DesignTokenOut",
    "DesignTokenUpdate",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "Pagination",
    "RegisterRequest",
    "UserPublic",
    "UserResponse",
    "VerifyResponse",
]
