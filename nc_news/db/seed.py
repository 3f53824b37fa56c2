from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from sqlalchemy import insert

from nc_news.db.base import Base
from nc_news.db.sa import create_sa_engine
from nc_news.models import tables

logger = logging.getLogger("nc_news.seed")


def _from_epoch_ms(value: Any) -> Any:
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return value


def _with_dates(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out = []
    for row in rows:
        r = dict(row)
        if "created_at" in r:
            r["created_at"] = _from_epoch_ms(r["created_at"])
        out.append(r)
    return out


async def seed(dsn: str | None, data: Mapping[str, List[Dict[str, Any]]]) -> None:
    """Drop and recreate every table, then insert ``data`` in FK order.

    ``data`` maps ``topics``, ``users``, ``articles`` and ``comments`` to row
    dicts. Serial ids restart at 1 because the tables are recreated.
    """
    engine = create_sa_engine(dsn)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

            for model, key in (
                (tables.Topic, "topics"),
                (tables.User, "users"),
                (tables.Article, "articles"),
                (tables.Comment, "comments"),
            ):
                rows = _with_dates(list(data.get(key, [])))
                # Insert one by one so serial ids follow list order.
                for row in rows:
                    await conn.execute(insert(model).values(**row))
    finally:
        await engine.dispose()

    logger.info(
        "Database seeded",
        extra={"event": "seed_completed", **{f"{k}_count": len(v) for k, v in data.items()}},
    )
