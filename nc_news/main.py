from contextlib import asynccontextmanager
from typing import Optional

import logging

from fastapi import FastAPI

from nc_news.api import articles
from nc_news.api import topics
from nc_news.config import LOG_LEVEL, ROOT_PATH
from nc_news.core.errors import install_error_handlers
from nc_news.db.pool import Database


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Build the API around a ``Database`` handle.

    The handle is opened on startup and closed on shutdown; passing one in
    lets callers point the app at another DSN.
    """
    # Basic logging configuration (can be overridden by server config)
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    database = db if db is not None else Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect()
        try:
            yield
        finally:
            await database.close()

    app = FastAPI(
        title="NC News",
        lifespan=lifespan,
        root_path=ROOT_PATH,
    )
    app.state.db = database
    app.include_router(topics.router)
    app.include_router(articles.router)
    install_error_handlers(app)
    return app


app = create_app()
