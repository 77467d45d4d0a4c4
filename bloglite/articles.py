"""The article aggregate, its value objects and its builder."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, replace
from enum import IntEnum

from bloglite import events
from bloglite.content import Content
from bloglite.errors import (
    ArticleCategoryFormatError,
    ArticleDeletedError,
    ArticleIdFormatError,
    ArticleSlugFormatError,
    ArticleStatusNoChangedError,
    DuplicateArticleCategoryError,
    InvalidCategoryError,
)
from bloglite.version import VersionHistory

_ULID_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_SLUG_PATTERN = re.compile(r"[a-zA-Z0-9-]+")
ARTICLE_SLUG_MAX_LENGTH = 25


def _new_ulid() -> str:
    timestamp = (time.time_ns() // 1_000_000) & ((1 << 48) - 1)
    value = (timestamp << 80) | int.from_bytes(os.urandom(10), "big")
    return "".join(_ULID_ALPHABET[(value >> (5 * i)) & 31] for i in reversed(range(26)))


def _is_ulid(value: str) -> bool:
    if len(value) != 26:
        return False
    upper = value.upper()
    if any(ch not in _ULID_ALPHABET for ch in upper):
        return False
    return _ULID_ALPHABET.index(upper[0]) <= 7


class _ArticleValue(str):
    """A string value object validated on construction."""

    def __new__(cls, value: str) -> _ArticleValue:
        obj = super().__new__(cls, str(value))
        obj._validate()
        return obj

    def _validate(self) -> None:
        pass

    @classmethod
    def _unchecked(cls, value: str) -> _ArticleValue:
        return str.__new__(cls, str(value))


class ArticleSlug(_ArticleValue):
    """URL slug: 1 to 25 ASCII letters, digits or hyphens."""

    def _validate(self) -> None:
        if (
            len(self.encode("utf-8")) > ARTICLE_SLUG_MAX_LENGTH
            or not self
            or " " in self
            or not _SLUG_PATTERN.fullmatch(self)
        ):
            raise ArticleSlugFormatError()


class ArticleCategory(_ArticleValue):
    """Category identifier: any non-empty string."""

    def _validate(self) -> None:
        if not self:
            raise ArticleCategoryFormatError()


class ArticleId(_ArticleValue):
    """Article identifier in ULID form."""

    def _validate(self) -> None:
        if not _is_ulid(self):
            raise ArticleIdFormatError()


class ArticleAuthor(_ArticleValue):
    """Author name; not validated."""


class ArticleState(IntEnum):
    DELETED = -1
    PRIVATE = 0
    PUBLIC = 1


@dataclass
class Article:
    """The article aggregate."""

    id: ArticleId
    slug: ArticleSlug
    category: ArticleCategory
    version_history: VersionHistory
    state: ArticleState

    def public(self) -> tuple[Article, events.ArticleStateChanged]:
        """Return a public copy of a private article and the state event."""
        return self._switch_state(ArticleState.PUBLIC)

    def private(self) -> tuple[Article, events.ArticleStateChanged]:
        """Return a private copy of a public article and the state event."""
        return self._switch_state(ArticleState.PRIVATE)

    def _switch_state(
        self, target: ArticleState
    ) -> tuple[Article, events.ArticleStateChanged]:
        if self.state is ArticleState.DELETED:
            raise ArticleDeletedError()
        if self.state is target:
            raise ArticleStatusNoChangedError()
        article = replace(self, state=target)
        return article, events.ArticleStateChanged(id=str(self.id), state=int(target))

    def update_content(self, content: Content) -> events.ArticleContentUpdated:
        """Add the content as a new current version."""
        prev_version = self.version_history.current_version_hash
        self.version_history.add_version(content.hash)
        return events.ArticleContentUpdated(
            id=str(self.id),
            parent_version=prev_version,
            current_version=self.version_history.current_version_hash,
            title=str(content.frontmatter.title),
            tags=content.frontmatter.tags.to_list(),
            summary=str(content.frontmatter.summary),
            body=str(content.body),
            rendered_body=content.rendered_body,
            rendered_summary=content.rendered_summary,
        )

    def revert_to_version(self, version_hash: str) -> events.ArticleContentReverted:
        """Make an earlier version current again."""
        prev_version = self.version_history.current_version_hash
        self.version_history.rollback_to_version(version_hash)
        return events.ArticleContentReverted(
            id=str(self.id),
            prev_version=prev_version,
            current_version=self.version_history.current_version_hash,
        )

    def change_article_category(
        self, category_id: str, is_valid: bool
    ) -> events.ArticleCategoryChanged:
        """Move the article to another registered category."""
        if not is_valid:
            raise InvalidCategoryError()
        category = ArticleCategory(category_id)
        if self.category == category:
            raise DuplicateArticleCategoryError()
        self.category = category
        return events.ArticleCategoryChanged(
            id=str(self.id),
            old_category_id=str(self.category),
            new_category_id=str(category),
        )

    def delete(self) -> events.ArticleDeleted:
        """Mark the article deleted."""
        self.state = ArticleState.DELETED
        return events.ArticleDeleted(id=str(self.id))


class ArticleBuilder:
    """Collects the parts of a new article and builds it."""

    def __init__(self) -> None:
        self._id = _new_ulid()
        self._slug: str | None = None
        self._author: str | None = None
        self._category: str | None = None
        self._is_valid_category = False
        self._content: Content | None = None

    def slug(self, slug: str) -> ArticleBuilder:
        self._slug = str(slug)
        return self

    def author(self, author: str) -> ArticleBuilder:
        self._author = str(author)
        return self

    def category(self, category: str, is_valid: bool) -> ArticleBuilder:
        self._category = str(category)
        self._is_valid_category = bool(is_valid)
        return self

    def content(self, content: Content) -> ArticleBuilder:
        self._content = content
        return self

    def build(self) -> tuple[Article, events.ArticleCreated]:
        """Validate the collected parts and return the article and its event."""
        missing = [
            name
            for name, value in (
                ("slug", self._slug),
                ("author", self._author),
                ("category", self._category),
                ("content", self._content),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"article builder is missing: {', '.join(missing)}")
        assert self._content is not None

        if not self._is_valid_category:
            raise InvalidCategoryError()

        history = VersionHistory(self._content.hash)
        current_version = history.current_version_hash

        slug = ArticleSlug(self._slug)
        category = ArticleCategory(self._category)
        content = self._content

        article = Article(
            id=ArticleId._unchecked(self._id),
            slug=slug,
            category=category,
            version_history=history,
            state=ArticleState.PRIVATE,
        )
        event = events.ArticleCreated(
            id=self._id,
            slug=str(slug),
            current_version=current_version,
            category_id=str(category),
            author=str(self._author),
            state=int(ArticleState.PRIVATE),
            title=str(content.frontmatter.title),
            tags=content.frontmatter.tags.to_list(),
            body=str(content.body),
            rendered_body=content.rendered_body,
            summary=str(content.frontmatter.summary),
            rendered_summary=content.rendered_summary,
        )
        return article, event


def article_from_repository(
    id: str,
    slug: str,
    category: str,
    state: ArticleState,
    history: VersionHistory,
) -> Article:
    """Rebuild an article from stored data without validating it."""
    return Article(
        id=ArticleId._unchecked(id),
        slug=ArticleSlug._unchecked(slug),
        category=ArticleCategory._unchecked(category),
        version_history=history,
        state=ArticleState(state),
    )