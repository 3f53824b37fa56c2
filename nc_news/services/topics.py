from __future__ import annotations

from typing import List

from nc_news.db.pool import Database
from nc_news.db.queries import SELECT_TOPIC_EXISTS, SELECT_TOPICS


async def list_topics(db: Database) -> List[dict]:
    p = db.pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(SELECT_TOPICS)
        return [dict(r) for r in rows]


async def topic_exists(db: Database, slug: str) -> bool:
    p = db.pool()
    async with p.acquire() as conn:
        found = await conn.fetchval(SELECT_TOPIC_EXISTS, slug)
        return found is not None
