"""Article content: front matter, body and the pipeline that builds them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bloglite.errors import MissingFieldError
from bloglite.validators import Body, Summary, TagGroup, Title


@dataclass(frozen=True)
class FrontMatter:
    """Metadata taken from the head of an article document."""

    title: Title
    tags: TagGroup
    summary: Summary


@dataclass(frozen=True)
class Content:
    """A fully processed article document."""

    frontmatter: FrontMatter
    hash: str
    body: Body
    rendered_summary: str
    rendered_body: str


class ContentParser(ABC):
    """Splits a raw document into front matter fields and body."""

    @abstractmethod
    def parse(self, raw: str) -> tuple[dict[str, str], str]:
        """Return the front matter mapping and the body text."""


class ContentRender(ABC):
    """Renders text to HTML."""

    @abstractmethod
    async def render(self, content: str) -> str:
        """Return the HTML for the given text."""


class ContentHasher(ABC):
    """Computes a non-empty hash identifying a piece of content."""

    @abstractmethod
    def hash(self, frontmatter: FrontMatter, body: Body) -> str:
        """Return the hash of the front matter and body."""


class ContentFactory:
    """Turns a raw document into validated, hashed and rendered content."""

    def __init__(
        self, parser: ContentParser, hasher: ContentHasher, render: ContentRender
    ) -> None:
        self._parser = parser
        self._hasher = hasher
        self._render = render

    async def process(self, raw_content: str) -> Content:
        """Parse, validate, hash and render a raw document."""
        metadata, body_text = self._parser.parse(raw_content)
        body = Body(body_text)

        frontmatter = self._build_frontmatter(metadata)
        content_hash = self._hasher.hash(frontmatter, body)

        rendered_body = await self._render.render(body)
        rendered_summary = await self._render.render(frontmatter.summary)

        return Content(
            frontmatter=frontmatter,
            hash=content_hash,
            body=body,
            rendered_summary=rendered_summary,
            rendered_body=rendered_body,
        )

    @staticmethod
    def _build_frontmatter(metadata: dict[str, str]) -> FrontMatter:
        if "title" not in metadata:
            raise MissingFieldError("title")
        title = Title(metadata["title"])
        if "summary" not in metadata:
            raise MissingFieldError("summary")
        summary = Summary(metadata["summary"])
        tags = TagGroup(metadata.get("tags", ""))
        return FrontMatter(title=title, tags=tags, summary=summary)