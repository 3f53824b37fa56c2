from __future__ import annotations

from typing import List

from nc_news.db.pool import Database
from nc_news.db.queries import SELECT_COMMENTS_BY_ARTICLE


async def list_comments(db: Database, article_id: int) -> List[dict]:
    # Newest first; callers check the article exists beforehand.
    p = db.pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(SELECT_COMMENTS_BY_ARTICLE, article_id)
        return [dict(r) for r in rows]
