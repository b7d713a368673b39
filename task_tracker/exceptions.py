# task_tracker/exceptions.py
"""
Error taxonomy for the API and the handlers that turn it into HTTP responses.

Handlers raise the specific error they detect; anything else bubbles up to the
catch-all handler, which logs it and answers with a generic 500.
"""

import enum
import logging
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Startup-fatal configuration problem (e.g. missing signing secret)"""


class InvalidToken(Exception):
    """A token failed verification. Deliberately carries no detail."""


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def payload(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def payload(self) -> Dict[str, Any]:
        body = super().payload()
        if self.errors:
            body["errors"] = self.errors
        return body


class UnauthenticatedReason(enum.Enum):
    MISSING = "missing"
    MALFORMED = "malformed"
    INVALID = "invalid"
    NO_IDENTITY = "no_identity"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"

    def __init__(self, reason: UnauthenticatedReason, message: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied. Insufficient permissions"

    def __init__(self, required_roles: Sequence[str], user_role: str, message: Optional[str] = None):
        super().__init__(message)
        self.required_roles = list(required_roles)
        self.user_role = user_role

    def payload(self) -> Dict[str, Any]:
        body = super().payload()
        body["requiredRoles"] = self.required_roles
        body["userRole"] = self.user_role
        return body


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidReference(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid reference"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_name(location: Sequence[Any]) -> str:
    # ("body", "employeeId") -> "employeeId"; the "body"/"query"/"path" prefix is dropped
    parts = [str(part) for part in location]
    if len(parts) > 1 and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        logger.info("Rejected %s %s: unauthenticated (%s)", request.method, request.url.path, exc.reason.value)
        headers = {"WWW-Authenticate": "Bearer"}
    elif isinstance(exc, Forbidden):
        logger.info(
            "Rejected %s %s: role %s not in %s",
            request.method, request.url.path, exc.user_role, exc.required_roles,
        )
    elif isinstance(exc, InternalError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.payload(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationError(errors=errors).payload(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().payload(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
