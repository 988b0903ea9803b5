"""
Tests for the composer API input schemas and checked parsing.

Validates that raw input becomes either a typed value or an
InputFailure naming the input and the offending fields.
"""

from composers_api.domain.catalog.constraints import current_year
from composers_api.domain.catalog.entities import ComposerFilter, SortField
from composers_api.interfaces.catalog.schemas import (
    APPENDED_WORKS,
    COMPOSER_BODY,
    COMPOSER_ID,
    LIST_PARAMS,
    ComposerBody,
)
from composers_api.shared.validation import InputFailure, InputSource, parse_input


def _fields(failure: InputFailure) -> set[str]:
    return {v.field for v in failure.violations}


class TestComposerBody:
    """Tests for the create/update body schema."""

    def test_valid_body_parses(self, composer_payload) -> None:
        body = parse_input(COMPOSER_BODY, composer_payload(), InputSource.BODY)
        assert isinstance(body, ComposerBody)
        draft = body.to_draft()
        assert draft.name == "J.S. Bach"
        assert draft.notable_works == ("Mass in B minor",)

    def test_notable_works_defaults_to_empty(self, composer_payload) -> None:
        payload = composer_payload()
        del payload["notableWorks"]
        body = parse_input(COMPOSER_BODY, payload, InputSource.BODY)
        assert body.notable_works == []

    def test_death_is_optional(self, composer_payload) -> None:
        payload = composer_payload()
        del payload["death"]
        body = parse_input(COMPOSER_BODY, payload, InputSource.BODY)
        assert body.death is None

    def test_death_before_born_fails_on_death(self, composer_payload) -> None:
        failure = parse_input(
            COMPOSER_BODY, composer_payload(born=1750, death=1685), InputSource.BODY
        )
        assert isinstance(failure, InputFailure)
        assert failure.source is InputSource.BODY
        assert _fields(failure) == {"death"}

    def test_future_year_rejected(self, composer_payload) -> None:
        payload = composer_payload(born=current_year() + 1)
        del payload["death"]
        failure = parse_input(COMPOSER_BODY, payload, InputSource.BODY)
        assert _fields(failure) == {"born"}

    def test_year_strings_rejected(self, composer_payload) -> None:
        failure = parse_input(
            COMPOSER_BODY, composer_payload(born="1685"), InputSource.BODY
        )
        assert "born" in _fields(failure)

    def test_short_work_title_rejected(self, composer_payload) -> None:
        failure = parse_input(
            COMPOSER_BODY, composer_payload(notableWorks=["Ok", "X"]), InputSource.BODY
        )
        assert _fields(failure) == {"notableWorks.1"}

    def test_missing_fields_all_reported(self) -> None:
        failure = parse_input(COMPOSER_BODY, {}, InputSource.BODY)
        assert _fields(failure) == {"name", "born", "era", "bio"}

    def test_non_object_rejected(self) -> None:
        failure = parse_input(COMPOSER_BODY, ["not", "an", "object"], InputSource.BODY)
        assert isinstance(failure, InputFailure)


class TestListComposersParams:
    """Tests for list query parameters."""

    def test_defaults(self) -> None:
        query = parse_input(LIST_PARAMS, {}, InputSource.QUERY).to_query()
        assert query.offset == 0
        assert query.limit == 10
        assert query.sort.field is SortField.NAME
        assert not query.sort.descending
        assert query.criteria.name is None

    def test_filters_and_sort(self) -> None:
        params = parse_input(
            LIST_PARAMS,
            {"name": "bach", "era": "baroque", "born": "1685", "sortBy": "-born"},
            InputSource.QUERY,
        )
        query = params.to_query()
        assert query.criteria == ComposerFilter(name="bach")
        assert query.sort.descending

    def test_malformed_death_rejected(self) -> None:
        failure = parse_input(LIST_PARAMS, {"death": "-1"}, InputSource.QUERY)
        assert _fields(failure) == {"death"}

    def test_negative_offset_rejected(self) -> None:
        failure = parse_input(LIST_PARAMS, {"offset": "-1"}, InputSource.QUERY)
        assert failure.source is InputSource.QUERY
        assert _fields(failure) == {"offset"}

    def test_unknown_sort_rejected(self) -> None:
        failure = parse_input(LIST_PARAMS, {"sortBy": "era"}, InputSource.QUERY)
        assert _fields(failure) == {"sortBy"}

    def test_unknown_keys_ignored(self) -> None:
        params = parse_input(LIST_PARAMS, {"page": "2"}, InputSource.QUERY)
        assert not isinstance(params, InputFailure)


class TestComposerIdParams:
    """Tests for the id path parameter."""

    def test_uuid_accepted(self) -> None:
        raw = "3f2b1c9e-8a7d-4e6f-9b0a-1c2d3e4f5a6b"
        params = parse_input(COMPOSER_ID, {"id": raw}, InputSource.PARAMS)
        assert params.composer_id == raw

    def test_garbage_rejected(self) -> None:
        failure = parse_input(COMPOSER_ID, {"id": "42"}, InputSource.PARAMS)
        assert failure.source is InputSource.PARAMS
        assert _fields(failure) == {"id"}


class TestAppendedWorks:
    """Tests for the append body."""

    def test_single_character_title_accepted(self) -> None:
        assert parse_input(APPENDED_WORKS, ["X"], InputSource.BODY) == ["X"]

    def test_empty_title_rejected(self) -> None:
        failure = parse_input(APPENDED_WORKS, ["Fine", ""], InputSource.BODY)
        assert _fields(failure) == {"1"}

    def test_object_rejected(self) -> None:
        failure = parse_input(APPENDED_WORKS, {"title": "X"}, InputSource.BODY)
        assert isinstance(failure, InputFailure)
