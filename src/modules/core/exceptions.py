"""Error taxonomy and the single HTTP error mapping point.

Domain modules raise subclasses of ``DomainError``; nothing between the
service layer and the edge catches or wraps them.  DRF invokes
``inventory_exception_handler`` (``REST_FRAMEWORK["EXCEPTION_HANDLER"]``)
for every exception escaping a view, and that is the only place where an
error becomes a status code and a JSON payload::

    {
        "timestamp": "...",
        "status": 404,
        "error": "Not Found",
        "message": "Category not found with id: '...'",
        "path": "/api/v1/categories/.../",
        "errorId": "...",
        "validationErrors": [{"field": "name", "message": "..."}]
    }

Unexpected exceptions are logged with their traceback and rendered as a
generic 500 that only carries the error id.
"""

from __future__ import annotations

import uuid
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple

import structlog
from django.http import Http404
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.middleware import correlation_id_var

logger = structlog.get_logger(__name__)

MALFORMED_JSON_MESSAGE = "Malformed JSON request. Please check your request body."
VALIDATION_FAILED_MESSAGE = "Validation failed for one or more fields"
ROUTE_NOT_FOUND_MESSAGE = "The requested resource was not found"


# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------


class DomainError(Exception):
    """Base class for every error the catalog raises on purpose."""

    status_code: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(DomainError):
    """A referenced entity does not exist."""

    status_code = HTTPStatus.NOT_FOUND
    entity: str = "Resource"

    def __init__(
        self, value: Any, field: str = "id", entity: Optional[str] = None
    ) -> None:
        self.entity = entity or self.entity
        self.field = field
        self.value = value
        super().__init__(f"{self.entity} not found with {field}: '{value}'")


class DuplicateValue(DomainError):
    """A value that must be unique is already taken."""

    entity: str = "Resource"

    def __init__(self, value: Any, field: str, entity: Optional[str] = None) -> None:
        self.entity = entity or self.entity
        self.field = field
        self.value = value
        super().__init__(f"{self.entity} with {field} '{value}' already exists")


class IntegrityConflict(DomainError):
    """A mutation would leave a dangling reference behind."""

    entity: str = "Resource"

    def __init__(self, reason: str, entity: Optional[str] = None) -> None:
        self.entity = entity or self.entity
        self.reason = reason
        super().__init__(reason)


class FieldValidation(DomainError):
    """One or more request fields violate their constraints."""

    def __init__(self, errors: List[Dict[str, str]]) -> None:
        self.errors = errors
        super().__init__(VALIDATION_FAILED_MESSAGE)

    @classmethod
    def single(cls, field: str, message: str) -> FieldValidation:
        return cls([{"field": field, "message": message}])

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> FieldValidation:
        """Flatten pydantic errors, naming fields as they appear on the wire.

        DTO attributes are snake_case while request bodies and query
        strings are camelCase, so ``category_id`` is reported as
        ``categoryId``.
        """
        errors = []
        for error in exc.errors():
            field = ".".join(
                to_camel(part) if isinstance(part, str) else str(part)
                for part in error["loc"]
            )
            message = error["msg"]
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            errors.append({"field": field or "body", "message": message})
        return cls(errors)

    @classmethod
    def from_drf(cls, detail: Any) -> FieldValidation:
        if isinstance(detail, dict):
            errors = [
                {"field": str(field), "message": str(message)}
                for field, messages in detail.items()
                for message in (messages if isinstance(messages, list) else [messages])
            ]
        elif isinstance(detail, list):
            errors = [{"field": "body", "message": str(message)} for message in detail]
        else:
            errors = [{"field": "body", "message": str(detail)}]
        return cls(errors)


class MalformedInput(DomainError):
    """The request could not be read (bad JSON, wrong parameter type, ...)."""


class RouteNotFound(DomainError):
    """No resource is mapped to the requested URL."""

    status_code = HTTPStatus.NOT_FOUND


class MethodNotSupported(DomainError):
    """The resource exists but does not accept the HTTP method."""

    status_code = HTTPStatus.METHOD_NOT_ALLOWED


class InternalFault(DomainError):
    """Unexpected failure; the detail stays in the server log."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


# ---------------------------------------------------------------------------
# HTTP mapping
# ---------------------------------------------------------------------------


def current_error_id() -> str:
    return correlation_id_var.get() or str(uuid.uuid4())


def _translate(exc: Exception, context: Dict[str, Any]) -> DomainError:
    """Bring framework and library errors into the domain taxonomy."""
    if isinstance(exc, DomainError):
        return exc
    if isinstance(exc, PydanticValidationError):
        return FieldValidation.from_pydantic(exc)
    if isinstance(exc, drf_exceptions.ValidationError):
        return FieldValidation.from_drf(exc.detail)
    if isinstance(exc, drf_exceptions.ParseError):
        return MalformedInput(MALFORMED_JSON_MESSAGE)
    if isinstance(exc, (Http404, drf_exceptions.NotFound)):
        return RouteNotFound(ROUTE_NOT_FOUND_MESSAGE)
    if isinstance(exc, drf_exceptions.MethodNotAllowed):
        view = context.get("view")
        supported = ", ".join(getattr(view, "allowed_methods", []) or [])
        request = context.get("request")
        method = request.method if request is not None else ""
        return MethodNotSupported(
            f"Request method '{method}' not supported. Supported methods: [{supported}]"
        )
    if isinstance(exc, drf_exceptions.APIException):
        error = DomainError(str(exc.detail))
        error.status_code = exc.status_code
        return error
    return InternalFault("An unexpected error occurred")


def build_error_payload(
    error: DomainError, path: str, error_id: str
) -> Tuple[Dict[str, Any], int]:
    status_code = int(error.status_code)
    message = error.message
    if isinstance(error, InternalFault):
        message = (
            "An unexpected error occurred. Please contact support with "
            f"error ID: {error_id}"
        )

    payload: Dict[str, Any] = {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
        "errorId": error_id,
    }
    if isinstance(error, FieldValidation):
        payload["validationErrors"] = error.errors
    return payload, status_code


def inventory_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    """DRF exception handler: one status + payload per error category."""
    request = context.get("request")
    path = request.path if request is not None else ""
    error_id = current_error_id()

    error = _translate(exc, context)
    payload, status_code = build_error_payload(error, path, error_id)

    if isinstance(error, InternalFault):
        logger.error(
            "request.unhandled_error",
            error_id=error_id,
            path=path,
            exc_type=type(exc).__name__,
            exc_info=exc,
        )
    else:
        logger.warning(
            "request.error",
            error_id=error_id,
            path=path,
            status_code=status_code,
            error_type=type(error).__name__,
            error_message=payload["message"],
        )

    set_rollback()
    headers = {}
    if isinstance(exc, drf_exceptions.MethodNotAllowed):
        view = context.get("view")
        if view is not None:
            headers["Allow"] = ", ".join(view.allowed_methods)
    return Response(payload, status=status_code, headers=headers or None)
