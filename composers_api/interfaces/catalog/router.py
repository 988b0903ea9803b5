"""
FastAPI routers for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Input is validated with checked parsing; failures are translated by
the shared error translator.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from composers_api.application.catalog.append_notable_works import (
    AppendNotableWorksUseCase,
)
from composers_api.application.catalog.create_composer import CreateComposerUseCase
from composers_api.application.catalog.delete_composer import DeleteComposerUseCase
from composers_api.application.catalog.dtos import (
    AppendNotableWorksCommand,
    SeedReport,
    UpdateComposerCommand,
)
from composers_api.application.catalog.get_composer import GetComposerUseCase
from composers_api.application.catalog.list_composers import ListComposersUseCase
from composers_api.application.catalog.seed_composers import SeedComposersUseCase
from composers_api.application.catalog.update_composer import UpdateComposerUseCase
from composers_api.domain.catalog.entities import Composer
from composers_api.interfaces.catalog.dependencies import (
    get_append_notable_works_use_case,
    get_create_composer_use_case,
    get_delete_composer_use_case,
    get_get_composer_use_case,
    get_list_composers_use_case,
    get_seed_composers_use_case,
    get_update_composer_use_case,
)
from composers_api.interfaces.catalog.schemas import (
    APPENDED_WORKS,
    COMPOSER_BODY,
    COMPOSER_ID,
    LIST_PARAMS,
    ComposerResponse,
    ErrorResponse,
    SeedResponse,
)
from composers_api.interfaces.request_flow import HTTP_201, HTTP_204, reply
from composers_api.shared.errors.handlers import input_failure_response
from composers_api.shared.validation import InputFailure, InputSource, parse_input

router = APIRouter(prefix="/composers", tags=["composers"])
seed_router = APIRouter(prefix="/seed", tags=["seed"])

_BAD_INPUT = {400: {"model": ErrorResponse}}
_MISSING = {404: {"model": ErrorResponse}}
_CONFLICT = {409: {"model": ErrorResponse}}


def _render_one(composer: Composer) -> dict[str, Any]:
    return ComposerResponse.from_entity(composer).to_json()


def _render_many(composers: list[Composer]) -> list[dict[str, Any]]:
    return [_render_one(composer) for composer in composers]


@router.get(
    "",
    response_model=list[ComposerResponse],
    responses=_BAD_INPUT,
    summary="List composers",
    description=(
        "Filter by name/era substring or exact born/death year, "
        "sort with sortBy, then page with offset/limit."
    ),
)
def list_composers(
    request: Request,
    use_case: ListComposersUseCase = Depends(get_list_composers_use_case),
) -> Response:
    """List composers matching the query string."""
    params = parse_input(LIST_PARAMS, dict(request.query_params), InputSource.QUERY)
    if isinstance(params, InputFailure):
        return input_failure_response(params)
    return reply(use_case.execute(params.to_query()), _render_many)


@router.get(
    "/{composer_id}",
    response_model=ComposerResponse,
    responses={**_BAD_INPUT, **_MISSING},
    summary="Get a composer",
)
def get_composer(
    composer_id: str,
    use_case: GetComposerUseCase = Depends(get_get_composer_use_case),
) -> Response:
    """Return one composer by id."""
    params = parse_input(COMPOSER_ID, {"id": composer_id}, InputSource.PARAMS)
    if isinstance(params, InputFailure):
        return input_failure_response(params)
    return reply(use_case.execute(params.composer_id), _render_one)


@router.post(
    "",
    status_code=HTTP_201,
    response_model=ComposerResponse,
    responses={**_BAD_INPUT, **_CONFLICT},
    summary="Create a composer",
)
def create_composer(
    body: Any = Body(default=None),
    use_case: CreateComposerUseCase = Depends(get_create_composer_use_case),
) -> Response:
    """Create a composer; the name must not be taken."""
    composer = parse_input(COMPOSER_BODY, body, InputSource.BODY)
    if isinstance(composer, InputFailure):
        return input_failure_response(composer)
    return reply(use_case.execute(composer.to_draft()), _render_one, HTTP_201)


@router.put(
    "/{composer_id}",
    response_model=ComposerResponse,
    responses={**_BAD_INPUT, **_MISSING, **_CONFLICT},
    summary="Replace a composer",
)
def update_composer(
    composer_id: str,
    body: Any = Body(default=None),
    use_case: UpdateComposerUseCase = Depends(get_update_composer_use_case),
) -> Response:
    """Replace every client-settable field of a composer."""
    params = parse_input(COMPOSER_ID, {"id": composer_id}, InputSource.PARAMS)
    if isinstance(params, InputFailure):
        return input_failure_response(params)
    composer = parse_input(COMPOSER_BODY, body, InputSource.BODY)
    if isinstance(composer, InputFailure):
        return input_failure_response(composer)

    command = UpdateComposerCommand(
        composer_id=params.composer_id, draft=composer.to_draft()
    )
    return reply(use_case.execute(command), _render_one)


@router.put(
    "/{composer_id}/notableworks",
    response_model=ComposerResponse,
    responses={**_BAD_INPUT, **_MISSING},
    summary="Append notable works",
    description="Body is a JSON array of titles (1-100 characters each).",
)
def append_notable_works(
    composer_id: str,
    body: Any = Body(default=None),
    use_case: AppendNotableWorksUseCase = Depends(get_append_notable_works_use_case),
) -> Response:
    """Append titles to the end of a composer's notable works."""
    params = parse_input(COMPOSER_ID, {"id": composer_id}, InputSource.PARAMS)
    if isinstance(params, InputFailure):
        return input_failure_response(params)
    works = parse_input(APPENDED_WORKS, body, InputSource.BODY)
    if isinstance(works, InputFailure):
        return input_failure_response(works)

    command = AppendNotableWorksCommand(
        composer_id=params.composer_id, works=tuple(works)
    )
    return reply(use_case.execute(command), _render_one)


@router.delete(
    "/{composer_id}",
    status_code=HTTP_204,
    response_class=Response,
    responses={**_BAD_INPUT, **_MISSING},
    summary="Delete a composer",
)
def delete_composer(
    composer_id: str,
    use_case: DeleteComposerUseCase = Depends(get_delete_composer_use_case),
) -> Response:
    """Permanently delete a composer."""
    params = parse_input(COMPOSER_ID, {"id": composer_id}, InputSource.PARAMS)
    if isinstance(params, InputFailure):
        return input_failure_response(params)
    return reply(use_case.execute(params.composer_id), _render_one, HTTP_204)


@seed_router.post(
    "",
    status_code=HTTP_201,
    response_model=SeedResponse,
    summary="Load sample composers",
    description="Inserts the bundled sample composers, skipping names already present.",
)
def seed_composers(
    use_case: SeedComposersUseCase = Depends(get_seed_composers_use_case),
) -> Response:
    """Seed the catalog with sample data."""

    def render(report: SeedReport) -> dict[str, int]:
        return SeedResponse(inserted=report.inserted, skipped=report.skipped).model_dump()

    return reply(use_case.execute(), render, HTTP_201)
