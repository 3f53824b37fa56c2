# nc_news/db/pool.py
from __future__ import annotations

import logging
from typing import Optional

import asyncpg

from nc_news.config import DB_DSN, DB_POOL_MAX_SIZE, DB_POOL_MIN_SIZE

logger = logging.getLogger("nc_news.db")


class Database:
    """Owns the asyncpg pool for one application instance.

    Opened by the app lifespan on startup and closed on shutdown; handlers
    receive it through ``Depends(get_db)`` instead of importing a global.
    """

    def __init__(self, dsn: Optional[str] = None, min_size: int = DB_POOL_MIN_SIZE,
                 max_size: int = DB_POOL_MAX_SIZE) -> None:
        self.dsn = dsn if dsn is not None else DB_DSN
        self.min_size = min_size
        self.max_size = max_size
        self._pool: Optional[asyncpg.pool.Pool] = None

    async def connect(self) -> None:
        if not self.dsn:
            raise RuntimeError("DATABASE_URL is not configured")
        if self._pool is None:
            # asyncpg wants a plain libpq DSN; accept the SQLAlchemy spelling too
            dsn = self.dsn.replace("postgresql+asyncpg://", "postgresql://", 1)
            self._pool = await asyncpg.create_pool(
                dsn=dsn, min_size=self.min_size, max_size=self.max_size
            )
            logger.info("Database pool opened", extra={"event": "db_pool_opened"})

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed", extra={"event": "db_pool_closed"})

    def pool(self) -> asyncpg.pool.Pool:
        if self._pool is None:
            raise RuntimeError("Database pool is not initialized. Call connect() first.")
        return self._pool
