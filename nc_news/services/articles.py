"""Facade that re-exports the article service functions.

Routers import this module so tests can patch a single namespace.
"""

from .articles_read import article_exists, get_article, list_articles  # noqa: F401
from .articles_votes import update_article_votes  # noqa: F401
from .comments import list_comments  # noqa: F401
from .topics import list_topics, topic_exists  # noqa: F401

__all__ = [
    "article_exists",
    "get_article",
    "list_articles",
    "update_article_votes",
    "list_comments",
    "list_topics",
    "topic_exists",
]
