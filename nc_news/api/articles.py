# nc_news/api/articles.py
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from nc_news.core.deps import get_db
from nc_news.core.errors import BadRequest, NotFound
from nc_news.core.validators import (
    parse_article_id,
    parse_inc_votes,
    validate_order,
    validate_sort_by,
    validate_topic,
)
from nc_news.db.pool import Database
from nc_news.models.schemas import ArticleResponse, ArticlesResponse, CommentsResponse
from nc_news.services import articles as svc

router = APIRouter(prefix="/api/articles", tags=["articles"])
logger = logging.getLogger("nc_news.articles")


# -----------------------
#  Listing
# -----------------------

@router.get("", response_model=ArticlesResponse,
            summary="Articles with comment_count, sortable and filterable by topic")
async def api_list_articles(
    sort_by: Optional[str] = Query(None, description="One of the article columns or comment_count"),
    order: Optional[str] = Query(None, description="asc | desc"),
    topic: Optional[str] = Query(None, description="Topic slug to filter by"),
    db: Database = Depends(get_db),
):
    """
    Defaults to newest first. An unknown topic slug is a 400, while a known
    topic with no articles is an empty list.
    """
    sort_col = validate_sort_by(sort_by)
    direction = validate_order(order)
    topic = validate_topic(topic)
    if topic is not None and not await svc.topic_exists(db, topic):
        logger.info(
            "Rejected unknown topic filter",
            extra={"event": "invalid_topic_query", "topic": topic},
        )
        raise BadRequest("Invalid topic query")

    rows = await svc.list_articles(db, sort_by=sort_col, order=direction, topic=topic)
    return {"articles": rows}


# -----------------------
#  Single article
# -----------------------

@router.get("/{article_id}", response_model=ArticleResponse,
            summary="Single article by id")
async def api_get_article(article_id: str, db: Database = Depends(get_db)):
    art_id = parse_article_id(article_id)
    art = await svc.get_article(db, art_id)
    if not art:
        logger.info(
            "Article not found",
            extra={"event": "article_not_found", "article_id": art_id},
        )
        raise NotFound(f"No article found for article_id: {art_id}")
    return {"article": art}


@router.patch("/{article_id}", response_model=ArticleResponse,
              summary="Add inc_votes to an article's votes")
async def api_update_article_votes(
    article_id: str,
    payload: Any = Body(None),
    db: Database = Depends(get_db),
):
    # Body is checked before the path so a bad body wins over a bad id.
    inc_votes = parse_inc_votes(payload)
    art_id = parse_article_id(article_id)

    art = await svc.update_article_votes(db, art_id, inc_votes)
    if not art:
        logger.info(
            "Vote update for missing article",
            extra={"event": "article_not_found", "article_id": art_id},
        )
        raise NotFound(f"No article found for article_id: {art_id}, cannot update votes")
    logger.info(
        "Article votes updated",
        extra={"event": "article_votes_updated", "article_id": art_id, "inc_votes": inc_votes},
    )
    return {"article": art}


# -----------------------
#  Comments
# -----------------------

@router.get("/{article_id}/comments", response_model=CommentsResponse,
            summary="Comments for an article, newest first")
async def api_list_comments(article_id: str, db: Database = Depends(get_db)):
    art_id = parse_article_id(article_id)
    if not await svc.article_exists(db, art_id):
        raise NotFound(f"No article found for article_id: {art_id}")
    rows = await svc.list_comments(db, art_id)
    return {"comments": rows}
