import copy
from datetime import datetime, timezone

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import nc_news`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient

from nc_news.db.data.test_data import TEST_DATA
from nc_news.db.queries import Order, SortBy


class FakeDatabase:
    """Stands in for ``Database`` so the lifespan opens no pool."""

    def __init__(self):
        self.connected = False

    async def connect(self):
        self.connected = True

    async def close(self):
        self.connected = False

    def pool(self):
        raise AssertionError("services should be patched in unit tests")


class FakeNewsStore:
    """In-memory rows shaped like the SQL results, built from the test dataset."""

    def __init__(self, data):
        data = copy.deepcopy(data)
        self.topics = data["topics"]
        self.articles = []
        for i, row in enumerate(data["articles"], start=1):
            self.articles.append({
                "article_id": i,
                "title": row["title"],
                "body": row["body"],
                "topic": row["topic"],
                "author": row["author"],
                "created_at": datetime.fromtimestamp(row["created_at"] / 1000, tz=timezone.utc),
                "votes": row.get("votes", 0),
            })
        self.comments = []
        for i, row in enumerate(data["comments"], start=1):
            self.comments.append({
                "comment_id": i,
                "article_id": row["article_id"],
                "author": row["author"],
                "body": row["body"],
                "votes": row.get("votes", 0),
                "created_at": datetime.fromtimestamp(row["created_at"] / 1000, tz=timezone.utc),
            })
        self.calls = []

    def _with_count(self, art):
        count = sum(1 for c in self.comments if c["article_id"] == art["article_id"])
        return {**art, "comment_count": count}

    async def list_topics(self, db):
        return [dict(t) for t in self.topics]

    async def topic_exists(self, db, slug):
        return any(t["slug"] == slug for t in self.topics)

    async def get_article(self, db, article_id):
        for art in self.articles:
            if art["article_id"] == article_id:
                return self._with_count(art)
        return None

    async def article_exists(self, db, article_id):
        return any(a["article_id"] == article_id for a in self.articles)

    async def list_articles(self, db, sort_by=SortBy.created_at, order=Order.desc, topic=None):
        self.calls.append(("list_articles", sort_by, order, topic))
        rows = [self._with_count(a) for a in self.articles if topic is None or a["topic"] == topic]
        rows.sort(key=lambda r: (r[sort_by.value], r["article_id"]), reverse=order is Order.desc)
        return rows

    async def update_article_votes(self, db, article_id, inc_votes):
        self.calls.append(("update_article_votes", article_id, inc_votes))
        for art in self.articles:
            if art["article_id"] == article_id:
                art["votes"] += inc_votes
                return self._with_count(art)
        return None

    async def list_comments(self, db, article_id):
        rows = [dict(c) for c in self.comments if c["article_id"] == article_id]
        rows.sort(key=lambda r: (r["created_at"], r["comment_id"]), reverse=True)
        return rows


@pytest.fixture()
def store(monkeypatch):
    from nc_news.services import articles as svc

    fake = FakeNewsStore(TEST_DATA)
    for name in (
        "list_topics",
        "topic_exists",
        "get_article",
        "article_exists",
        "list_articles",
        "update_article_votes",
        "list_comments",
    ):
        monkeypatch.setattr(svc, name, getattr(fake, name))
    return fake


@pytest.fixture()
def app():
    from nc_news.main import create_app

    return create_app(db=FakeDatabase())


@pytest.fixture()
def client(app, store):
    with TestClient(app) as test_client:
        yield test_client
