"""
Centralized failure translation for FastAPI.

Maps store failures and input failures to HTTP responses.
The mapping is total: any failure kind without its own row becomes 500.
No stack traces or internal details are exposed to clients.
"""

import logging
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from composers_api.domain.catalog.failures import (
    FailureKind,
    FieldViolation,
    StoreFailure,
)
from composers_api.shared.validation import (
    InputFailure,
    InputSource,
    violations_from_errors,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

# FastAPI reports request errors with loc[0] naming the request part.
_LOCATION_SOURCES = {
    "query": InputSource.QUERY,
    "path": InputSource.PARAMS,
    "body": InputSource.BODY,
}


def _violations_body(violations: tuple[FieldViolation, ...]) -> list[dict[str, str]]:
    return [asdict(violation) for violation in violations]


def _error_response(status_code: int, content: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)


def input_failure_response(failure: InputFailure) -> JSONResponse:
    """Build the 400 response for rejected request input."""
    logger.info(
        "Rejected %s: %s",
        failure.source.value,
        ", ".join(v.field for v in failure.violations),
    )
    return _error_response(
        HTTP_400,
        {
            "error": f"Invalid {failure.source.value}",
            "violations": _violations_body(failure.violations),
        },
    )


def failure_response(failure: StoreFailure) -> JSONResponse:
    """Translate a store failure into its HTTP response.

    Args:
        failure: Classified failure from the store adapter.

    Returns:
        404, 409, 400 or 500 JSON response.
    """
    if failure.kind is FailureKind.NOT_FOUND:
        return _error_response(HTTP_404, {"error": "Composer not found"})

    if failure.kind is FailureKind.CONFLICT:
        return _error_response(
            HTTP_409,
            {"error": "Composer already exists", "details": failure.details},
        )

    if failure.kind is FailureKind.VALIDATION:
        return input_failure_response(
            InputFailure(InputSource.BODY, failure.violations)
        )

    logger.error("Store failure: %s", failure.message)
    return _error_response(
        HTTP_500, {"details": failure.details.get("code", failure.message)}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the framework-level error handlers on the application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle input FastAPI rejected before the route ran (e.g. bad JSON)."""
        errors = exc.errors()
        head = errors[0]["loc"][0] if errors and errors[0]["loc"] else "body"
        source = _LOCATION_SOURCES.get(head, InputSource.BODY)
        return input_failure_response(
            InputFailure(source, violations_from_errors(errors, skip=1))
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, {"details": "Internal server error"})
