"""Apply parsed filter and sort specs to in-memory documents."""

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from functools import cmp_to_key

from fauxledger.application.query.fields import QUERY_FIELDS, FieldValue
from fauxledger.domain.entities import Document
from fauxledger.domain.value_objects import FilterOperator, FilterSpec, SortDirection, SortSpec

Op = FilterOperator


def stringify(value: FieldValue) -> str | None:
    """Canonical string form used by eq/neq/in/contains; drops trailing zeros."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        if value.is_zero():
            return "0"
        return format(value.normalize(), "f")
    return str(value)


def _as_number(value: object) -> Decimal | None:
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def matches(value: FieldValue, spec: FilterSpec, numeric: bool = False) -> bool:
    """True if ``value`` satisfies ``spec``.

    A missing value only satisfies neq and not_in. gt/gte/lt/lte only match
    on ``numeric`` fields.
    """
    op = spec.operator
    if value is None:
        return op in (Op.NEQ, Op.NOT_IN)

    text = stringify(value)
    if op is Op.EQ:
        return text == spec.value
    if op is Op.NEQ:
        return text != spec.value
    if op is Op.IN:
        return text in spec.value
    if op is Op.NOT_IN:
        return text not in spec.value
    if op is Op.CONTAINS:
        return str(spec.value).casefold() in text.casefold()
    if op is Op.STARTS_WITH:
        return text.casefold().startswith(str(spec.value).casefold())

    if not numeric:
        return False
    left = _as_number(value)
    right = _as_number(spec.value)
    if left is None or right is None:
        return False
    if op is Op.GT:
        return left > right
    if op is Op.GTE:
        return left >= right
    if op is Op.LT:
        return left < right
    if op is Op.LTE:
        return left <= right
    return False


def apply_filters(items: Sequence[Document], specs: Sequence[FilterSpec]) -> list[Document]:
    """Keep documents matching every spec (logical AND)."""
    if not specs:
        return list(items)
    bound = [(QUERY_FIELDS[s.field], s) for s in specs]
    return [
        item
        for item in items
        if all(matches(field.extract(item), s, field.numeric) for field, s in bound)
    ]


def _numeric_key(value: FieldValue) -> tuple[bool, Decimal]:
    number = None if value is None else _as_number(value)
    return (number is not None, number if number is not None else Decimal(0))


def compare_values(a: FieldValue, b: FieldValue, numeric: bool = False) -> int:
    """Decimal comparison for numeric fields, otherwise string comparison.

    Strings compare case-folded first, then by raw code points. Missing values
    sort first: as the empty string, or below every number.
    """
    if numeric:
        left_num, right_num = _numeric_key(a), _numeric_key(b)
        return (left_num > right_num) - (left_num < right_num)
    left = stringify(a) or ""
    right = stringify(b) or ""
    left_key = (left.casefold(), left)
    right_key = (right.casefold(), right)
    return (left_key > right_key) - (left_key < right_key)


def apply_sort(items: Sequence[Document], specs: Sequence[SortSpec]) -> list[Document]:
    """Stable multi-key sort; the first spec with a non-zero comparison decides."""
    if not specs:
        return list(items)
    bound = [
        (QUERY_FIELDS[s.field], -1 if s.direction is SortDirection.DESC else 1)
        for s in specs
    ]

    def compare(a: Document, b: Document) -> int:
        for field, sign in bound:
            result = compare_values(field.extract(a), field.extract(b), field.numeric)
            if result:
                return sign * result
        return 0

    return sorted(items, key=cmp_to_key(compare))
