# nc_news/db/queries.py
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple


class SortBy(str, Enum):
    article_id = "article_id"
    title = "title"
    topic = "topic"
    author = "author"
    created_at = "created_at"
    votes = "votes"
    comment_count = "comment_count"


class Order(str, Enum):
    asc = "asc"
    desc = "desc"


# Closed mapping: the only identifiers that ever reach ORDER BY.
SORT_COLUMNS = {
    SortBy.article_id: "a.article_id",
    SortBy.title: "a.title",
    SortBy.topic: "a.topic",
    SortBy.author: "a.author",
    SortBy.created_at: "a.created_at",
    SortBy.votes: "a.votes",
    SortBy.comment_count: "comment_count",
}

ORDER_KEYWORDS = {
    Order.asc: "ASC",
    Order.desc: "DESC",
}

ARTICLE_COLUMNS = """
    a.article_id,
    a.title,
    a.body,
    a.topic,
    a.author,
    a.created_at,
    a.votes,
    COUNT(c.comment_id)::int AS comment_count
"""

SELECT_TOPICS = "SELECT slug, description FROM topics"

SELECT_TOPIC_EXISTS = "SELECT 1 FROM topics WHERE slug = $1"

SELECT_ARTICLE_BY_ID = f"""
    SELECT {ARTICLE_COLUMNS}
    FROM articles a
    LEFT JOIN comments c ON c.article_id = a.article_id
    WHERE a.article_id = $1
    GROUP BY a.article_id
"""

# The CTE keeps the increment a single statement; the count is joined afterwards.
UPDATE_ARTICLE_VOTES = f"""
    WITH updated AS (
        UPDATE articles
        SET votes = votes + $1
        WHERE article_id = $2
        RETURNING *
    )
    SELECT {ARTICLE_COLUMNS}
    FROM updated a
    LEFT JOIN comments c ON c.article_id = a.article_id
    GROUP BY a.article_id, a.title, a.body, a.topic, a.author, a.created_at, a.votes
"""

SELECT_ARTICLE_EXISTS = "SELECT 1 FROM articles WHERE article_id = $1"

SELECT_COMMENTS_BY_ARTICLE = """
    SELECT comment_id, article_id, author, body, votes, created_at
    FROM comments
    WHERE article_id = $1
    ORDER BY created_at DESC, comment_id DESC
"""


def build_articles_query(
    sort_by: SortBy = SortBy.created_at,
    order: Order = Order.desc,
    topic: Optional[str] = None,
) -> Tuple[str, List[Any]]:
    """Compose the article listing query.

    ``sort_by`` and ``order`` are coerced to their enums and looked up in
    closed mappings, so a value that is not a member raises ``ValueError``
    instead of reaching the SQL.
    The topic is always bound as ``$1``.
    """
    column = SORT_COLUMNS[SortBy(sort_by)]
    direction = ORDER_KEYWORDS[Order(order)]

    args: List[Any] = []
    where_sql = ""
    if topic is not None:
        args.append(topic)
        where_sql = "WHERE a.topic = $%d" % len(args)

    sql = f"""
        SELECT {ARTICLE_COLUMNS}
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        {where_sql}
        GROUP BY a.article_id
        ORDER BY {column} {direction}, a.article_id {direction}
    """
    return sql, args
