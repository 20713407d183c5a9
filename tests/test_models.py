"""Model invariants: result identity and criteria validation."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from helpers import make_result
from search_filter.models import DEFAULT_MAX_RESULTS, FilterCriteria, SearchResult

pytestmark = pytest.mark.unit


def test_results_are_equal_iff_links_are_equal() -> None:
    a = make_result(1, title="A", safe=True)
    b = make_result(1, title="B", safe=False)
    c = make_result(2, title="A")

    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_result_is_immutable() -> None:
    result = make_result(1)

    with pytest.raises(ValidationError):
        result.title = "changed"


def test_result_defaults() -> None:
    result = SearchResult(link="https://example.com")

    assert result.safe is True
    assert result.indexed_time is None
    assert result.language_code is None


def test_result_rejects_naive_timestamp() -> None:
    with pytest.raises(ValidationError):
        SearchResult(link="https://example.com", indexed_time=datetime(2024, 1, 1))


def test_result_str() -> None:
    assert str(make_result(1, display_link="example.com")) == "Result 1 (example.com)"


def test_criteria_defaults() -> None:
    criteria = FilterCriteria()

    assert criteria.max_results == DEFAULT_MAX_RESULTS == 20
    assert criteria.safe_only is True
    assert criteria.from_date is None and criteria.to_date is None
    assert criteria.domain_whitelist == frozenset()


@pytest.mark.parametrize("value", [0, -1, -100])
def test_criteria_rejects_non_positive_max_results(value: int) -> None:
    with pytest.raises(ValidationError):
        FilterCriteria(max_results=value)


def test_criteria_rejects_non_positive_max_results_on_assignment() -> None:
    criteria = FilterCriteria()

    with pytest.raises(ValidationError):
        criteria.max_results = 0
    assert criteria.max_results == 20


def test_criteria_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        FilterCriteria(max_results=0)


def test_criteria_sets_are_frozen_and_normalized() -> None:
    criteria = FilterCriteria(
        domain_whitelist=["example.com", " github.com ", "", "  "],
        mime_types="application/pdf, text/html",
        language_codes=("en", "en"),
    )

    assert criteria.domain_whitelist == frozenset({"example.com", "github.com"})
    assert criteria.mime_types == frozenset({"application/pdf", "text/html"})
    assert criteria.language_codes == frozenset({"en"})
    assert isinstance(criteria.domain_whitelist, frozenset)


def test_criteria_rejects_naive_dates() -> None:
    with pytest.raises(ValidationError):
        FilterCriteria(from_date=datetime(2024, 1, 1))
