"""
Request-handling core shared by every route.

Each route runs the same sequence:

    VALIDATE -> (400) -> EXECUTE-STORE-OP -> (classify failure) -> RESPOND

Routes call ``parse_input`` for each part of the request, hand the
typed values to a use case, then pass the StoreResult to ``reply``.
"""

from typing import Any, Callable, TypeVar

from fastapi import Response
from fastapi.responses import JSONResponse

from composers_api.domain.catalog.failures import StoreResult
from composers_api.shared.errors.handlers import failure_response

T = TypeVar("T")

HTTP_200 = 200
HTTP_201 = 201
HTTP_204 = 204


def reply(
    result: StoreResult[T],
    render: Callable[[T], Any],
    status_code: int = HTTP_200,
) -> Response:
    """Turn a use case result into the HTTP response.

    Args:
        result: Outcome of the store operation.
        render: Converts the success value into a JSON-compatible body.
        status_code: Status for success. 204 sends an empty body.
    """
    if not result.ok:
        return failure_response(result.failure)
    if status_code == HTTP_204:
        return Response(status_code=HTTP_204)
    return JSONResponse(status_code=status_code, content=render(result.value))
