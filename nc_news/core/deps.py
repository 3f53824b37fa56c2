from __future__ import annotations

from fastapi import Request

from nc_news.db.pool import Database


def get_db(request: Request) -> Database:
    """`db: Database = Depends(get_db)`: the handle opened by the app lifespan."""
    return request.app.state.db
