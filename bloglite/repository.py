"""Persistence port for the article aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from bloglite.articles import Article, ArticleId, ArticleSlug
from bloglite.events import DomainEvent


@dataclass(frozen=True)
class Event:
    """A domain event ready to publish: its topic and serialized message."""

    topic: str
    message: bytes


def to_event(event: DomainEvent) -> Event:
    """Wrap a domain event with its topic and JSON payload."""
    if not isinstance(event, DomainEvent):
        raise TypeError(f"not a domain event: {event!r}")
    return Event(topic=event.TOPIC, message=event.to_json().encode("utf-8"))


class ArticleRepository(ABC):
    """Loads and stores articles together with their events."""

    @abstractmethod
    async def find(self, article_id: ArticleId) -> Article | None:
        """Return the article with this id, or None."""

    @abstractmethod
    async def find_by_slug(self, slug: ArticleSlug) -> Article | None:
        """Return the article with this slug, or None."""

    @abstractmethod
    async def save_all(self, article: Article, events: Iterable[Event]) -> None:
        """Store the article and publish its events atomically."""