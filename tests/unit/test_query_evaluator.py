"""Unit tests for filter evaluation and sorting."""

from decimal import Decimal

import pytest

from fauxledger.application.query import (
    apply_filters,
    apply_sort,
    matches,
    parse_filter,
    parse_sort,
)
from fauxledger.application.query.evaluator import compare_values, stringify
from fauxledger.domain.value_objects import DocumentStatus, FilterOperator, FilterSpec

S = DocumentStatus
Op = FilterOperator


@pytest.fixture
def documents(document_factory):
    return [
        document_factory("d1", status=S.INIT, amount="100", partner="Acme Corp", currency="USD"),
        document_factory("d2", status=S.PAID, amount="20", partner="beta Ltd", currency="EUR"),
        document_factory("d3", status=S.SUBMITTED, amount="3", partner="Acme Labs", currency="USD"),
        document_factory("d4", status=S.PAID, amount="5000.00", partner="alpha", currency="USD"),
    ]


def _ids(docs) -> list[str]:
    return [d.id for d in docs]


def test_eq_returns_only_matching(documents) -> None:
    assert _ids(apply_filters(documents, parse_filter("status:eq:PAID"))) == ["d2", "d4"]


def test_in_returns_union(documents) -> None:
    result = apply_filters(documents, parse_filter("status:in:INIT|SUBMITTED"))
    assert _ids(result) == ["d1", "d3"]


def test_not_in(documents) -> None:
    result = apply_filters(documents, parse_filter("status:not_in:PAID"))
    assert _ids(result) == ["d1", "d3"]


def test_filters_are_anded(documents) -> None:
    result = apply_filters(documents, parse_filter("status:eq:PAID,currency:eq:USD"))
    assert _ids(result) == ["d4"]


def test_numeric_comparison_is_not_lexical(documents) -> None:
    result = apply_filters(documents, parse_filter("totalTransactionAmountInMajors:gt:25"))
    assert _ids(result) == ["d1", "d4"]


def test_numeric_eq_uses_canonical_string(documents) -> None:
    """Trailing zeros are dropped before string comparison."""
    result = apply_filters(documents, parse_filter("totalTransactionAmountInMajors:eq:5000"))
    assert _ids(result) == ["d4"]


def test_contains_and_starts_with_ignore_case(documents) -> None:
    assert _ids(apply_filters(documents, parse_filter("businessPartnerName:contains:ACME"))) == [
        "d1",
        "d3",
    ]
    assert _ids(
        apply_filters(documents, parse_filter("businessPartnerName:starts_with:Be"))
    ) == ["d2"]


def test_no_filters_returns_copy(documents) -> None:
    result = apply_filters(documents, [])
    assert result == documents
    assert result is not documents


@pytest.mark.parametrize(
    ("operator", "expected"),
    [
        (Op.EQ, False),
        (Op.NEQ, True),
        (Op.GT, False),
        (Op.LTE, False),
        (Op.IN, False),
        (Op.NOT_IN, True),
        (Op.CONTAINS, False),
        (Op.STARTS_WITH, False),
    ],
)
def test_missing_value_matches_only_negations(operator: FilterOperator, expected: bool) -> None:
    value = frozenset({"x"}) if operator.is_membership else "0"
    assert matches(None, FilterSpec("status", operator, value)) is expected


def test_numeric_operator_on_non_numeric_value_never_matches() -> None:
    assert matches("abc", FilterSpec("documentNumber", Op.GT, "5")) is False
    assert matches(Decimal(10), FilterSpec("totalTransactionAmountInMajors", Op.GT, "x")) is False


def test_stringify_drops_trailing_zeros() -> None:
    assert stringify(Decimal("5000.00")) == "5000"
    assert stringify(Decimal("12.50")) == "12.5"
    assert stringify(None) is None


def test_sort_numeric_ascending(documents) -> None:
    result = apply_sort(documents, parse_sort("totalTransactionAmountInMajors:asc"))
    assert _ids(result) == ["d3", "d2", "d1", "d4"]


def test_sort_descending(documents) -> None:
    result = apply_sort(documents, parse_sort("totalTransactionAmountInMajors:desc"))
    assert _ids(result) == ["d4", "d1", "d2", "d3"]


def test_string_sort_is_case_folded(documents) -> None:
    result = apply_sort(documents, parse_sort("businessPartnerName"))
    assert [d.business_partner_name for d in result] == [
        "Acme Corp",
        "Acme Labs",
        "alpha",
        "beta Ltd",
    ]


def test_sort_is_stable(documents) -> None:
    """Equal keys keep their input order."""
    result = apply_sort(documents, parse_sort("currency"))
    assert _ids(result) == ["d2", "d1", "d3", "d4"]


def test_multi_key_sort(documents) -> None:
    result = apply_sort(documents, parse_sort("status:asc,totalTransactionAmountInMajors:desc"))
    assert _ids(result) == ["d1", "d4", "d2", "d3"]


def test_compare_values_raw_tiebreak() -> None:
    """Case-folded equal strings are ordered by code point."""
    assert compare_values("Alpha", "alpha") < 0
    assert compare_values("alpha", "Alpha") > 0
    assert compare_values("same", "same") == 0
    assert compare_values(None, "a") < 0


def test_range_operators_only_apply_to_numeric_fields(documents, document_factory) -> None:
    numbered = [document_factory("n1", document_number="10"), document_factory("n2")]
    assert apply_filters(numbered, parse_filter("documentNumber:gt:5")) == []
    assert matches("10", FilterSpec("documentNumber", Op.GT, "5"), numeric=True) is True
    result = apply_filters(documents, parse_filter("totalTransactionAmountInMajors:lte:20"))
    assert _ids(result) == ["d2", "d3"]


def test_compare_values_numeric_field() -> None:
    assert compare_values(Decimal("9"), Decimal("10"), numeric=True) < 0
    assert compare_values(Decimal("9"), Decimal("10")) > 0
    assert compare_values(None, Decimal("-1"), numeric=True) < 0


def test_stringify_large_and_zero_amounts() -> None:
    assert stringify(Decimal("999999999999999.99")) == "999999999999999.99"
    assert stringify(Decimal("1E+3")) == "1000"
    assert stringify(Decimal("0.00")) == "0"
