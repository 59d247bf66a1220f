"""
Query-string -> MongoDB filter translation for the listing endpoints.

All builders are pure: they take already-parsed inputs and return a filter
document ready for ``find`` / ``count_documents``. Clauses are only added
for inputs that were actually supplied; with nothing supplied the filter is
``{}``.
"""
import re
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, Tuple

from bson import ObjectId

from dashboard_api.core.errors import InvalidInputError

MongoFilter = Dict[str, Any]

END_OF_DAY = time(23, 59, 59, 999000)


def _contains(term: str) -> Dict[str, str]:
    # search terms are literal substrings, not patterns
    return {"$regex": re.escape(term), "$options": "i"}


def build_product_filter(search: Optional[str] = None, category: Optional[str] = None) -> MongoFilter:
    query: MongoFilter = {}
    if search:
        query["name"] = _contains(search)
    if category:
        query["category"] = category
    return query


def parse_day(value: str, field: str) -> date:
    """
    Accepts ``YYYY-MM-DD`` or a full ISO-8601 datetime; only the calendar
    date is kept.
    """
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidInputError(f"Invalid {field}: '{value}'")


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """First and last millisecond of ``day`` in UTC."""
    return (
        datetime.combine(day, time.min, tzinfo=timezone.utc),
        datetime.combine(day, END_OF_DAY, tzinfo=timezone.utc),
    )


def build_order_search_clause(search: str) -> MongoFilter:
    pattern = re.escape(search)
    return {
        "$or": [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"phone": {"$regex": pattern, "$options": "i"}},
            {
                "$expr": {
                    "$regexMatch": {
                        "input": {"$toString": "$_id"},
                        "regex": pattern,
                        "options": "i",
                    }
                }
            },
        ]
    }


def build_order_filter(
    search: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> MongoFilter:
    """Order filter without the pagination cursor (used for totals as well)."""
    query: MongoFilter = {}

    if search:
        query.update(build_order_search_clause(search))

    if start_date or end_date:
        date_range: Dict[str, datetime] = {}
        if start_date:
            date_range["$gte"] = day_bounds(parse_day(start_date, "startDate"))[0]
        if end_date:
            date_range["$lte"] = day_bounds(parse_day(end_date, "endDate"))[1]
        query["orderDate"] = date_range

    return query


def apply_cursor(query: MongoFilter, after: Optional[str]) -> MongoFilter:
    """
    Returns a copy of ``query`` restricted to ids greater than ``after``.
    A malformed cursor is ignored.
    """
    if not after or not ObjectId.is_valid(after):
        return dict(query)
    return {**query, "_id": {"$gt": ObjectId(after)}}
