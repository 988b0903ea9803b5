"""
Tests for the catalog application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic, not field rules.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from composers_api.application.catalog.append_notable_works import (
    AppendNotableWorksUseCase,
)
from composers_api.application.catalog.create_composer import CreateComposerUseCase
from composers_api.application.catalog.delete_composer import DeleteComposerUseCase
from composers_api.application.catalog.dtos import (
    AppendNotableWorksCommand,
    ListComposersQuery,
    UpdateComposerCommand,
)
from composers_api.application.catalog.get_composer import GetComposerUseCase
from composers_api.application.catalog.list_composers import ListComposersUseCase
from composers_api.application.catalog.seed_composers import SeedComposersUseCase
from composers_api.application.catalog.update_composer import UpdateComposerUseCase
from composers_api.domain.catalog.entities import (
    Composer,
    ComposerDraft,
    ComposerFilter,
    SortField,
    SortSpec,
)
from composers_api.domain.catalog.failures import FailureKind, StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _composer(index: int) -> Composer:
    return Composer(
        id=f"id-{index}",
        name=f"Composer {index:02d}",
        born=1700 + index,
        era="Baroque",
        bio="A composer used in tests.",
        created_at=NOW,
        updated_at=NOW,
    )


def _draft(name: str = "Bach") -> ComposerDraft:
    return ComposerDraft(
        name=name, born=1685, era="Baroque", bio="German composer of the Baroque."
    )


def _repository() -> MagicMock:
    return MagicMock(spec=ComposerRepository)


class TestListComposersUseCase:
    """Tests for the ListComposersUseCase."""

    def test_passes_filter_and_sort_to_store(self) -> None:
        repo = _repository()
        repo.find.return_value = StoreResult.success([])
        criteria = ComposerFilter(name="bach")
        sort = SortSpec(SortField.BORN, descending=True)

        ListComposersUseCase(repo).execute(ListComposersQuery(criteria=criteria, sort=sort))

        repo.find.assert_called_once_with(criteria, sort)

    def test_slices_after_retrieval(self) -> None:
        repo = _repository()
        repo.find.return_value = StoreResult.success([_composer(i) for i in range(25)])

        result = ListComposersUseCase(repo).execute(ListComposersQuery(offset=5, limit=3))

        assert [c.id for c in result.value] == ["id-5", "id-6", "id-7"]

    def test_default_page_is_first_ten(self) -> None:
        repo = _repository()
        repo.find.return_value = StoreResult.success([_composer(i) for i in range(25)])

        result = ListComposersUseCase(repo).execute(ListComposersQuery())

        assert len(result.value) == 10
        assert result.value[0].id == "id-0"

    def test_zero_limit_returns_nothing(self) -> None:
        repo = _repository()
        repo.find.return_value = StoreResult.success([_composer(1)])

        result = ListComposersUseCase(repo).execute(ListComposersQuery(limit=0))

        assert result.ok
        assert result.value == []

    def test_offset_past_end_returns_empty(self) -> None:
        repo = _repository()
        repo.find.return_value = StoreResult.success([_composer(1)])

        result = ListComposersUseCase(repo).execute(ListComposersQuery(offset=50))

        assert result.value == []

    def test_store_failure_is_passed_through(self) -> None:
        repo = _repository()
        failure = StoreResult.fail(FailureKind.STORE, "down", {"code": "e3q8"})
        repo.find.return_value = failure

        assert ListComposersUseCase(repo).execute(ListComposersQuery()) is failure


class TestSingleRecordUseCases:
    """Tests for get, create, update, delete and append."""

    def test_get_delegates(self) -> None:
        repo = _repository()
        repo.get_by_id.return_value = StoreResult.success(_composer(1))

        result = GetComposerUseCase(repo).execute("id-1")

        repo.get_by_id.assert_called_once_with("id-1")
        assert result.value.id == "id-1"

    def test_create_returns_conflict_unchanged(self) -> None:
        repo = _repository()
        repo.create.return_value = StoreResult.fail(FailureKind.CONFLICT, "taken")

        result = CreateComposerUseCase(repo).execute(_draft())

        assert result.failure.kind is FailureKind.CONFLICT

    def test_update_passes_id_and_draft(self) -> None:
        repo = _repository()
        repo.update_by_id.return_value = StoreResult.success(_composer(1))
        draft = _draft()

        UpdateComposerUseCase(repo).execute(UpdateComposerCommand("id-1", draft))

        repo.update_by_id.assert_called_once_with("id-1", draft)

    def test_delete_missing_is_not_found(self) -> None:
        repo = _repository()
        repo.delete_by_id.return_value = StoreResult.not_found("id-9")

        result = DeleteComposerUseCase(repo).execute("id-9")

        assert result.failure.kind is FailureKind.NOT_FOUND

    def test_append_passes_works_in_order(self) -> None:
        repo = _repository()
        repo.append_notable_works.return_value = StoreResult.success(_composer(1))

        AppendNotableWorksUseCase(repo).execute(
            AppendNotableWorksCommand("id-1", ("First", "Second"))
        )

        repo.append_notable_works.assert_called_once_with("id-1", ["First", "Second"])


class TestSeedComposersUseCase:
    """Tests for the SeedComposersUseCase."""

    def test_counts_inserted_and_skipped(self) -> None:
        repo = _repository()
        repo.create.side_effect = [
            StoreResult.success(_composer(1)),
            StoreResult.fail(FailureKind.CONFLICT, "taken"),
            StoreResult.success(_composer(2)),
        ]

        result = SeedComposersUseCase(
            repo, [_draft("A1"), _draft("B2"), _draft("C3")]
        ).execute()

        assert result.value.inserted == 2
        assert result.value.skipped == 1

    def test_stops_on_store_failure(self) -> None:
        repo = _repository()
        repo.create.side_effect = [
            StoreResult.success(_composer(1)),
            StoreResult.fail(FailureKind.STORE, "down"),
        ]

        result = SeedComposersUseCase(
            repo, [_draft("A1"), _draft("B2"), _draft("C3")]
        ).execute()

        assert result.failure.kind is FailureKind.STORE
        assert repo.create.call_count == 2
