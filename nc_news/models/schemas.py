# nc_news/models/schemas.py
from pydantic import BaseModel
from typing import List
from datetime import datetime


# --- Topic ---
class Topic(BaseModel):
    slug: str
    description: str


# --- Article with its derived comment_count ---
# Used for the listing, the single-article view and the vote update
class Article(BaseModel):
    article_id: int
    title: str
    body: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    comment_count: int = 0


class Comment(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime


# --- Response envelopes ---
class TopicsResponse(BaseModel):
    topics: List[Topic]


class ArticleResponse(BaseModel):
    article: Article


class ArticlesResponse(BaseModel):
    articles: List[Article]


class CommentsResponse(BaseModel):
    comments: List[Comment]
