"""Parse textual filter and sort expressions into validated specs.

Filter grammar: ``field:operator:value[,field:operator:value...]``; for ``in`` and
``not_in`` the value is ``|``-separated. Sort grammar:
``field[:direction][,field[:direction]...]`` with direction ``asc`` (default) or
``desc``. Both parsers raise ValidationError on the first bad fragment and never
return a partial result.
"""

from fauxledger.application.query.fields import ALLOWED_FIELDS
from fauxledger.domain.exceptions import ValidationError
from fauxledger.domain.value_objects import FilterOperator, FilterSpec, SortDirection, SortSpec

_OPERATORS = {op.value: op for op in FilterOperator}
_DIRECTIONS = {d.value: d for d in SortDirection}


def _check_field(field: str, kind: str) -> None:
    if not field or field not in ALLOWED_FIELDS:
        raise ValidationError(
            f"Invalid {kind} field: {field!r}. Allowed fields: {', '.join(sorted(ALLOWED_FIELDS))}",
            field=field,
        )


def parse_filter(text: str | None) -> list[FilterSpec]:
    """Parse ``field:operator:value`` triples."""
    if not text or not text.strip():
        return []

    specs: list[FilterSpec] = []
    for part in text.split(","):
        segments = part.strip().split(":")
        if len(segments) < 3:
            raise ValidationError(
                f"Invalid filter format: {part.strip()!r} (expected field:operator:value)",
                value=part.strip(),
            )
        field, operator, *rest = segments
        raw_value = ":".join(rest)

        _check_field(field, "filter")
        op = _OPERATORS.get(operator)
        if op is None:
            raise ValidationError(
                f"Invalid filter operator: {operator!r}. "
                f"Supported operators: {', '.join(_OPERATORS)}",
                field=field,
                operator=operator,
            )

        value: str | frozenset[str] = (
            frozenset(raw_value.split("|")) if op.is_membership else raw_value
        )
        specs.append(FilterSpec(field=field, operator=op, value=value))
    return specs


def parse_sort(text: str | None) -> list[SortSpec]:
    """Parse ``field:direction`` pairs."""
    if not text or not text.strip():
        return []

    specs: list[SortSpec] = []
    for part in text.split(","):
        segments = part.strip().split(":")
        if len(segments) > 2:
            raise ValidationError(
                f"Invalid sort format: {part.strip()!r} (expected field:direction)",
                value=part.strip(),
            )
        field = segments[0]
        raw_direction = segments[1].strip().lower() if len(segments) == 2 else ""

        _check_field(field, "sort")
        if not raw_direction:
            direction = SortDirection.ASC
        elif raw_direction in _DIRECTIONS:
            direction = _DIRECTIONS[raw_direction]
        else:
            raise ValidationError(
                f"Invalid sort direction: {segments[1]!r} (expected asc or desc)",
                field=field,
                value=segments[1],
            )
        specs.append(SortSpec(field=field, direction=direction))
    return specs
