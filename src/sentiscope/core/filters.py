"""Filter engine over aspect rows."""

from typing import Iterable, List, Optional

from .constants import UIConstants
from .models import AspectRow, FilterCriteria


def _matches(value: str, selected: str) -> bool:
    return selected == UIConstants.ALL or value == selected


def row_matches(row: AspectRow, criteria: FilterCriteria) -> bool:
    """True if the row satisfies every active criterion."""
    if not _matches(row.hotel_name, criteria.hotel):
        return False
    if not _matches(row.sentiment, criteria.sentiment):
        return False
    if not _matches(row.language, criteria.language):
        return False
    if not _matches(row.aspect, criteria.aspect):
        return False
    if criteria.query:
        haystack = f"{row.review_text} {row.hotel_name}".lower()
        if criteria.query.lower() not in haystack:
            return False
    return True


def filter_rows(rows: Iterable[AspectRow], criteria: Optional[FilterCriteria] = None) -> List[AspectRow]:
    """Keep the rows matching all criteria, in their original order."""
    rows = list(rows)
    if criteria is None or criteria.is_noop():
        return rows
    return [row for row in rows if row_matches(row, criteria)]


def hotel_names(rows: Iterable[AspectRow]) -> List[str]:
    """Distinct non-empty hotel names in first-seen order."""
    seen = {}
    for row in rows:
        if row.hotel_name:
            seen.setdefault(row.hotel_name, None)
    return list(seen)
