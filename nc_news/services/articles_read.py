from __future__ import annotations

from typing import List, Optional

from nc_news.db.pool import Database
from nc_news.db.queries import (
    SELECT_ARTICLE_BY_ID,
    SELECT_ARTICLE_EXISTS,
    Order,
    SortBy,
    build_articles_query,
)


async def get_article(db: Database, article_id: int) -> Optional[dict]:
    """Article row with its ``comment_count``, or ``None`` if there is no such id."""
    p = db.pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(SELECT_ARTICLE_BY_ID, article_id)
        if not row:
            return None
        return dict(row)


async def article_exists(db: Database, article_id: int) -> bool:
    p = db.pool()
    async with p.acquire() as conn:
        found = await conn.fetchval(SELECT_ARTICLE_EXISTS, article_id)
        return found is not None


async def list_articles(
    db: Database,
    sort_by: SortBy = SortBy.created_at,
    order: Order = Order.desc,
    topic: Optional[str] = None,
) -> List[dict]:
    sql, args = build_articles_query(sort_by=sort_by, order=order, topic=topic)
    p = db.pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql, *args)
        return [dict(r) for r in rows]
