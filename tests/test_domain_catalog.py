"""
Tests for the catalog domain layer.

Tests field constraints, sort parsing and failure values in isolation.
No external dependencies or IO required.
"""

import pytest

from composers_api.domain.catalog.constraints import (
    APPENDED_WORK,
    NOTABLE_WORK,
    check_composer,
    current_year,
    lifespan_violation,
    works_violations,
    year_violation,
)
from composers_api.domain.catalog.entities import ComposerDraft, SortField, SortSpec
from composers_api.domain.catalog.failures import FailureKind, StoreResult


def _draft(**overrides) -> ComposerDraft:
    fields = dict(
        name="Clara Schumann",
        born=1819,
        death=1896,
        era="Romantic",
        bio="Pianist and composer of the Romantic era.",
        notable_works=("Piano Concerto in A minor",),
    )
    fields.update(overrides)
    return ComposerDraft(**fields)


class TestCheckComposer:
    """Tests for the shared composer constraint check."""

    def test_valid_draft_has_no_violations(self) -> None:
        assert check_composer(_draft()) == []

    def test_missing_death_is_valid(self) -> None:
        assert check_composer(_draft(death=None)) == []

    def test_death_before_born_is_rejected(self) -> None:
        violations = check_composer(_draft(born=1900, death=1850))
        assert [v.field for v in violations] == ["death"]

    def test_death_equal_to_born_is_valid(self) -> None:
        assert check_composer(_draft(born=1900, death=1900)) == []

    def test_every_field_reported_together(self) -> None:
        violations = check_composer(
            _draft(name="X", era="", bio="short", born=-1, notable_works=("A",))
        )
        fields = {v.field for v in violations}
        assert fields == {"name", "era", "bio", "born", "notableWorks.0"}

    def test_bounds_are_inclusive(self) -> None:
        draft = _draft(name="A" * 100, era="AB", bio="B" * 10, notable_works=("Op",))
        assert check_composer(draft) == []

    def test_name_over_limit_rejected(self) -> None:
        violations = check_composer(_draft(name="A" * 101))
        assert violations[0].field == "name"
        assert "100" in violations[0].reason


class TestYears:
    """Tests for year bounds."""

    def test_current_year_allowed(self) -> None:
        assert year_violation(current_year()) is None

    def test_zero_allowed(self) -> None:
        assert year_violation(0) is None

    def test_future_year_rejected(self) -> None:
        assert year_violation(current_year() + 1) is not None

    def test_negative_year_rejected(self) -> None:
        assert year_violation(-5) is not None

    def test_lifespan_without_death(self) -> None:
        assert lifespan_violation(1800, None) is None


class TestNotableWorks:
    """Tests for notable work length rules."""

    def test_single_character_fails_standard_bounds(self) -> None:
        assert works_violations(["X"], NOTABLE_WORK)[0].field == "notableWorks.0"

    def test_single_character_passes_append_bounds(self) -> None:
        assert works_violations(["X"], APPENDED_WORK) == []

    def test_reports_index_of_offender(self) -> None:
        violations = works_violations(["Fine", "", "Also fine"], APPENDED_WORK)
        assert [v.field for v in violations] == ["notableWorks.1"]


class TestSortSpec:
    """Tests for sortBy token parsing."""

    @pytest.mark.parametrize(
        "token,field,descending",
        [
            ("name", SortField.NAME, False),
            ("-name", SortField.NAME, True),
            ("born", SortField.BORN, False),
            ("-born", SortField.BORN, True),
            ("death", SortField.DEATH, False),
            ("-death", SortField.DEATH, True),
        ],
    )
    def test_parse(self, token: str, field: SortField, descending: bool) -> None:
        spec = SortSpec.parse(token)
        assert spec.field is field
        assert spec.descending is descending

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValueError):
            SortSpec.parse("era")


class TestStoreResult:
    """Tests for the store result value."""

    def test_success(self) -> None:
        result = StoreResult.success(3)
        assert result.ok
        assert result.value == 3

    def test_not_found_carries_id(self) -> None:
        result = StoreResult.not_found("abc")
        assert not result.ok
        assert result.failure.kind is FailureKind.NOT_FOUND
        assert result.failure.details == {"id": "abc"}
