from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def _to_sqlalchemy_async_dsn(dsn: str | None) -> str:
    if not dsn:
        raise RuntimeError("DATABASE_URL is not configured")
    # Ensure SQLAlchemy asyncpg dialect
    if dsn.startswith("postgresql+asyncpg://"):
        return dsn
    if dsn.startswith("postgresql://"):
        return dsn.replace("postgresql://", "postgresql+asyncpg://", 1)
    if dsn.startswith("postgres://"):
        return dsn.replace("postgres://", "postgresql+asyncpg://", 1)
    # Fallback: assume already usable
    return dsn


def create_sa_engine(dsn: str | None) -> AsyncEngine:
    return create_async_engine(_to_sqlalchemy_async_dsn(dsn), pool_pre_ping=True)
