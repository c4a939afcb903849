"""Filter/sort query engine."""

from fauxledger.application.query.evaluator import apply_filters, apply_sort, matches
from fauxledger.application.query.fields import ALLOWED_FIELDS, QUERY_FIELDS, QueryField
from fauxledger.application.query.parser import parse_filter, parse_sort

__all__ = [
    "ALLOWED_FIELDS",
    "QUERY_FIELDS",
    "QueryField",
    "apply_filters",
    "apply_sort",
    "matches",
    "parse_filter",
    "parse_sort",
]
