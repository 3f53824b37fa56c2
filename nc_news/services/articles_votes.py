from __future__ import annotations

from typing import Optional

from nc_news.db.pool import Database
from nc_news.db.queries import UPDATE_ARTICLE_VOTES


async def update_article_votes(db: Database, article_id: int, inc_votes: int) -> Optional[dict]:
    """Add ``inc_votes`` to the stored votes in one statement.

    Returns the updated row with ``comment_count``, or ``None`` when no
    article has ``article_id`` (nothing is written in that case).
    """
    p = db.pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(UPDATE_ARTICLE_VOTES, inc_votes, article_id)
        if not row:
            return None
        return dict(row)
