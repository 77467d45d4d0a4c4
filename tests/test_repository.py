import json

import pytest

from bloglite.articles import ArticleState, article_from_repository
from bloglite.events import ArticleDeleted, ArticleStateChanged
from bloglite.repository import ArticleRepository, Event, to_event
from bloglite.version import VersionHistory


class _MemoryRepository(ArticleRepository):
    def __init__(self):
        self.articles = {}
        self.events = []

    async def find(self, article_id):
        return self.articles.get(str(article_id))

    async def find_by_slug(self, slug):
        return next((a for a in self.articles.values() if a.slug == slug), None)

    async def save_all(self, article, events):
        self.articles[str(article.id)] = article
        self.events.extend(events)


def test_to_event_topic():
    assert to_event(ArticleDeleted(id="a")).topic == "article.deleted"


def test_to_event_message_round_trip():
    domain_event = ArticleStateChanged(id="a", state=1)
    event = to_event(domain_event)
    assert json.loads(event.message) == domain_event.to_dict()
    assert ArticleStateChanged.from_json(event.message) == domain_event


def test_to_event_rejects_other_objects():
    with pytest.raises(TypeError):
        to_event({"id": "a"})


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        ArticleRepository()


@pytest.mark.asyncio
async def test_save_and_find():
    repo = _MemoryRepository()
    article = article_from_repository(
        "01ARZ3NDEKTSV4RRFFQ69G5FAV", "slug", "category", ArticleState.PRIVATE, VersionHistory("hash")
    )
    event = to_event(article.delete())
    await repo.save_all(article, [event])

    assert await repo.find(article.id) is article
    assert await repo.find_by_slug("slug") is article
    assert repo.events == [Event(topic="article.deleted", message=event.message)]