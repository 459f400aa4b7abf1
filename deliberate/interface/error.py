"""Interface layer errors and their HTTP translation."""

from typing import Any, Sequence

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deliberate.domain.error import (
    AccessDeniedError,
    ConflictError,
    DomainError,
    InvalidVoteValueError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    kind = "interface-error"


class AuthenticationRequiredError(InterfaceError):
    """Raised when a request carries no valid session."""

    kind = "unauthenticated"


# Checked in order, so subclasses map through their parent's status
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(kind: str, detail: str) -> dict[str, str]:
    """Structured error body returned by every failing endpoint."""
    return {"error": kind, "detail": detail}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error into its structured response."""
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Unmapped domain error",
            path=request.url.path,
            kind=exc.kind,
            error=str(exc),
        )
    return JSONResponse(status_code=code, content=error_body(exc.kind, str(exc)))


async def handle_authentication_required(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    """Translate a missing or invalid session into 401."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(exc.kind, str(exc)),
    )


# Path parameters naming the resource a route acts on
_RESOURCE_BY_PATH_PARAM = {
    "question_id": "Question",
    "solution_id": "Solution",
    "procon_id": "ProCon",
}

# Body field of the vote endpoint
_VOTE_VALUE_LOC = ("body", "value")


def _describe(error: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())[1:])
    message = error.get("msg", "invalid")
    return f"{field}: {message}" if field else message


def domain_error_for(errors: Sequence[dict[str, Any]]) -> DomainError:
    """Pick the domain error describing a request that failed schema checks.

    A malformed path ID cannot name an existing resource, so it reads as
    not-found. Any failure on the vote value is an invalid vote, whatever
    its JSON type. Everything else is a validation error.
    """
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if len(loc) == 2 and loc[0] == "path":
            resource = _RESOURCE_BY_PATH_PARAM.get(str(loc[1]), "Resource")
            return NotFoundError(resource, str(error.get("input")))

    for error in errors:
        if tuple(error.get("loc", ())) == _VOTE_VALUE_LOC:
            return InvalidVoteValueError(error.get("input"))

    detail = "; ".join(_describe(error) for error in errors)
    return ValidationError(detail or "Invalid request")


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Give schema failures the same structured body as domain errors."""
    error = domain_error_for(exc.errors())
    logfire.info(
        "Request rejected",
        path=request.url.path,
        kind=error.kind,
        errors=len(exc.errors()),
    )
    return await handle_domain_error(request, error)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for interface and domain errors."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(
        AuthenticationRequiredError, handle_authentication_required
    )
