"""
Helpers for turning filter DTOs into repository predicates and sort keys
"""
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from sqlalchemy.sql.elements import ColumnElement


def has_text(value: Optional[str]) -> bool:
    """True for strings that are not None, empty or whitespace"""
    return value is not None and value.strip() != ""


def resolve_sort(
    sort_by: Optional[str],
    sort_descending: bool,
    columns: Dict[str, ColumnElement],
) -> Tuple[Optional[ColumnElement], bool]:
    """
    Map a client-supplied sort name to a column

    Names are matched case-insensitively against ``columns``. An absent
    name returns (None, not sort_descending): the repository orders by id
    in the requested direction. An unknown name returns (None, True), id
    ascending whatever sort_descending says.

    Returns:
        Tuple of (sort column or None, ascending)
    """
    if not has_text(sort_by):
        return None, not sort_descending
    column = columns.get(sort_by.strip().lower())
    if column is None:
        return None, True
    return column, not sort_descending


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
