# nc_news/api/topics.py
from fastapi import APIRouter, Depends

from nc_news.core.deps import get_db
from nc_news.db.pool import Database
from nc_news.models.schemas import TopicsResponse
from nc_news.services import articles as svc

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=TopicsResponse, summary="All topics in storage order")
async def api_list_topics(db: Database = Depends(get_db)):
    rows = await svc.list_topics(db)
    return {"topics": rows}
