from __future__ import annotations

import re
from typing import Any, Optional

from nc_news.core.errors import BAD_REQUEST, BadRequest
from nc_news.db.queries import Order, SortBy


# Bounds of a PostgreSQL ``integer`` column.
PG_INT_MIN = -(2 ** 31)
PG_INT_MAX = 2 ** 31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")

MISSING_INC_VOTES = "Bad request, must have inc_votes"


def parse_article_id(raw: str) -> int:
    """Parse a path segment as an article id, or raise ``BadRequest``."""
    if not _INT_RE.fullmatch(raw or ""):
        raise BadRequest(BAD_REQUEST)
    value = int(raw)
    if not PG_INT_MIN <= value <= PG_INT_MAX:
        raise BadRequest(BAD_REQUEST)
    return value


def parse_inc_votes(body: Any) -> int:
    if not isinstance(body, dict) or "inc_votes" not in body:
        raise BadRequest(MISSING_INC_VOTES)
    value = body["inc_votes"]
    # bool is an int subclass; JSON true/false is not a vote delta.
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequest(BAD_REQUEST)
    if not PG_INT_MIN <= value <= PG_INT_MAX:
        raise BadRequest(BAD_REQUEST)
    return value


def validate_sort_by(raw: Optional[str]) -> SortBy:
    if raw is None:
        return SortBy.created_at
    try:
        return SortBy(raw)
    except ValueError:
        raise BadRequest("Invalid sort_by query")


def validate_order(raw: Optional[str]) -> Order:
    if raw is None:
        return Order.desc
    try:
        return Order(raw)
    except ValueError:
        raise BadRequest("Invalid order query")


def validate_topic(raw: Optional[str]) -> Optional[str]:
    # PostgreSQL text cannot hold NUL, so such a slug can never exist.
    if raw is not None and "\x00" in raw:
        raise BadRequest("Invalid topic query")
    return raw
