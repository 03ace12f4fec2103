"""Typed failures raised by services and rendered as {"error": ...} by the app."""

from collections.abc import Iterable, Mapping
from typing import Any

# Location prefixes FastAPI adds to request validation errors.
_REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header"})


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Flatten pydantic error dicts into one line, e.g. "type: Input should be 'button', ...'"."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        msg = err.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


class AppError(Exception):
    """Base class for failures that map to a client-visible HTTP status."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400


class AuthenticationError(AppError):
    """Missing, invalid or expired credential."""

    status_code = 401


class PermissionDeniedError(AppError):
    """Authenticated caller lacks the role or ownership for the operation."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation. Reported as 400 to match the public API convention."""

    status_code = 400
