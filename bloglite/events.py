"""Domain events emitted by the article aggregate."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, TypeVar

_E = TypeVar("_E", bound="DomainEvent")


@dataclass
class DomainEvent:
    """Base of every article event; each subclass has a fixed topic."""

    TOPIC: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the event fields as a plain dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Return the event serialized as JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls: type[_E], data: dict[str, Any]) -> _E:
        """Build the event from a dictionary of its fields."""
        return cls(**data)

    @classmethod
    def from_json(cls: type[_E], text: str | bytes) -> _E:
        """Build the event from its JSON form."""
        return cls.from_dict(json.loads(text))


@dataclass
class ArticleCreated(DomainEvent):
    TOPIC: ClassVar[str] = "article.created"

    id: str
    slug: str
    current_version: str
    category_id: str
    author: str
    state: int
    title: str
    tags: list[str] = field(default_factory=list)
    body: str = ""
    rendered_body: str = ""
    summary: str = ""
    rendered_summary: str = ""


@dataclass
class ArticleContentUpdated(DomainEvent):
    TOPIC: ClassVar[str] = "article.content_updated"

    id: str
    parent_version: str
    current_version: str
    title: str
    tags: list[str] = field(default_factory=list)
    body: str = ""
    rendered_body: str = ""
    summary: str = ""
    rendered_summary: str = ""


@dataclass
class ArticleContentReverted(DomainEvent):
    TOPIC: ClassVar[str] = "article.content_reverted"

    id: str
    prev_version: str
    current_version: str


@dataclass
class ArticleCategoryChanged(DomainEvent):
    TOPIC: ClassVar[str] = "article.category_changed"

    id: str
    old_category_id: str
    new_category_id: str


@dataclass
class ArticleStateChanged(DomainEvent):
    TOPIC: ClassVar[str] = "article.state_changed"

    id: str
    state: int


@dataclass
class ArticleDeleted(DomainEvent):
    TOPIC: ClassVar[str] = "article.deleted"

    id: str