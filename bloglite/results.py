"""Read models returned by article queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


@dataclass
class CategoryResult:
    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class ArticleMetaResult:
    slug: str
    title: str
    summary: str
    author: str
    tags: list[str]
    category: CategoryResult
    created_at: int
    updated_at: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "summary": self.summary,
            "author": self.author,
            "tags": list(self.tags),
            "category": self.category.to_dict(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class ArticleWithContentResult:
    parent: ArticleMetaResult
    content: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return {**self.parent.to_dict(), "content": self.content, "version": self.version}


@dataclass
class ArticleForAdminResult:
    id: str
    parent: ArticleMetaResult
    state: int
    version: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            **self.parent.to_dict(),
            "state": self.state,
            "version": self.version,
        }


@dataclass
class ArticleListResult(Generic[T]):
    count: int
    total: int
    page: int
    limit: int
    items: list[T] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "items": [_plain(item) for item in self.items],
        }


@dataclass
class ItemsResult(Generic[T]):
    total: int
    items: list[T] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "items": [_plain(item) for item in self.items]}


def items_result(items: Iterable[T]) -> ItemsResult[T]:
    """Collect items into a result carrying their count."""
    collected = list(items)
    return ItemsResult(total=len(collected), items=collected)