from __future__ import annotations

import pytest

from nc_news.core.errors import BadRequest
from nc_news.core.validators import (
    parse_article_id,
    parse_inc_votes,
    validate_order,
    validate_sort_by,
)
from nc_news.db.queries import Order, SortBy


@pytest.mark.parametrize("raw, expected", [("3", 3), ("0", 0), ("-7", -7), ("+12", 12), ("0042", 42)])
def test_parse_article_id_accepts_integers(raw, expected):
    assert parse_article_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "news", "3.0", " 3", "3a", "2147483648", "\u0663", "\uff13", "3\n"])
def test_parse_article_id_rejects(raw):
    with pytest.raises(BadRequest) as exc:
        parse_article_id(raw)
    assert exc.value.msg == "Bad request"


def test_parse_inc_votes_reads_only_inc_votes():
    assert parse_inc_votes({"inc_votes": -3, "title": "ignored"}) == -3


@pytest.mark.parametrize("body", [None, {}, {"votes": 1}, [], "inc_votes"])
def test_parse_inc_votes_missing(body):
    with pytest.raises(BadRequest) as exc:
        parse_inc_votes(body)
    assert exc.value.msg == "Bad request, must have inc_votes"


@pytest.mark.parametrize("value", ["1", 1.0, False, None, {"n": 1}, 2 ** 40])
def test_parse_inc_votes_invalid(value):
    with pytest.raises(BadRequest) as exc:
        parse_inc_votes({"inc_votes": value})
    assert exc.value.msg == "Bad request"


def test_sort_by_and_order_defaults():
    assert validate_sort_by(None) is SortBy.created_at
    assert validate_order(None) is Order.desc


def test_sort_by_whitelist():
    assert validate_sort_by("comment_count") is SortBy.comment_count
    with pytest.raises(BadRequest, match="Invalid sort_by query"):
        validate_sort_by("body")


def test_order_whitelist():
    assert validate_order("asc") is Order.asc
    with pytest.raises(BadRequest, match="Invalid order query"):
        validate_order("DESC")


def test_topic_passes_through_or_rejects_nul():
    from nc_news.core.validators import validate_topic

    assert validate_topic(None) is None
    assert validate_topic("mitch") == "mitch"
    with pytest.raises(BadRequest, match="Invalid topic query"):
        validate_topic("mi\x00tch")
