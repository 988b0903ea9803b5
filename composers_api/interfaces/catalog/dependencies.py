"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the store adapter into
use cases via constructor injection. The engine is the per-application
store handle created by ``create_app`` and kept on ``app.state``.
"""

from fastapi import Depends, Request

from composers_api.application.catalog.append_notable_works import (
    AppendNotableWorksUseCase,
)
from composers_api.application.catalog.create_composer import CreateComposerUseCase
from composers_api.application.catalog.delete_composer import DeleteComposerUseCase
from composers_api.application.catalog.get_composer import GetComposerUseCase
from composers_api.application.catalog.list_composers import ListComposersUseCase
from composers_api.application.catalog.seed_composers import SeedComposersUseCase
from composers_api.application.catalog.update_composer import UpdateComposerUseCase
from composers_api.domain.catalog.ports import ComposerRepository
from composers_api.infrastructure.catalog.composer_repository import (
    SqlComposerRepository,
)
from composers_api.infrastructure.catalog.seed_data import load_seed_drafts


def get_composer_repository(request: Request) -> ComposerRepository:
    """Build the store adapter around the application's engine."""
    return SqlComposerRepository(engine=request.app.state.engine)


def get_list_composers_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> ListComposersUseCase:
    return ListComposersUseCase(repository=repository)


def get_get_composer_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> GetComposerUseCase:
    return GetComposerUseCase(repository=repository)


def get_create_composer_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> CreateComposerUseCase:
    return CreateComposerUseCase(repository=repository)


def get_update_composer_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> UpdateComposerUseCase:
    return UpdateComposerUseCase(repository=repository)


def get_delete_composer_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> DeleteComposerUseCase:
    return DeleteComposerUseCase(repository=repository)


def get_append_notable_works_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> AppendNotableWorksUseCase:
    return AppendNotableWorksUseCase(repository=repository)


def get_seed_composers_use_case(
    repository: ComposerRepository = Depends(get_composer_repository),
) -> SeedComposersUseCase:
    """Build SeedComposersUseCase with the bundled sample composers."""
    return SeedComposersUseCase(repository=repository, drafts=load_seed_drafts())
