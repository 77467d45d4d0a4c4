"""Validated value types for article content fields."""

from __future__ import annotations

from collections.abc import Iterator

from bloglite.errors import (
    BODY_MAX_LENGTH,
    SUMMARY_MAX_LENGTH,
    TAG_MAX_LENGTH,
    TAG_MAX_NUM,
    TITLE_MAX_LENGTH,
    BodyTooLongError,
    ContentError,
    EmptyFieldError,
    InvalidTagFormatError,
    SummaryTooLongError,
    TagTooLongError,
    TagTooManyError,
    TitleTooLongError,
)


def _byte_length(value: str) -> int:
    return len(value.encode("utf-8"))


class _Field(str):
    """A string whose UTF-8 size is bounded and which may not be empty."""

    MAX_LENGTH: int
    _too_long: type[ContentError]
    _field_name: str | None = None

    def __new__(cls, value: str) -> _Field:
        value = str(value)
        if _byte_length(value) > cls.MAX_LENGTH:
            raise cls._too_long()
        if cls._field_name is not None and not value:
            raise EmptyFieldError(cls._field_name)
        return super().__new__(cls, value)


class Title(_Field):
    """Article title: non-empty, at most 800 bytes."""

    MAX_LENGTH = TITLE_MAX_LENGTH
    _too_long = TitleTooLongError
    _field_name = "title"


class Summary(_Field):
    """Article summary: non-empty, at most 1 KiB."""

    MAX_LENGTH = SUMMARY_MAX_LENGTH
    _too_long = SummaryTooLongError
    _field_name = "summary"


class Body(_Field):
    """Article body: at most 2 MiB."""

    MAX_LENGTH = BODY_MAX_LENGTH
    _too_long = BodyTooLongError


class Tag(str):
    """A tag of letters, digits (any script) and hyphens, at most 20 bytes."""

    MAX_LENGTH = TAG_MAX_LENGTH

    def __new__(cls, value: str) -> Tag:
        value = str(value)
        if _byte_length(value) > cls.MAX_LENGTH:
            raise TagTooLongError()
        if not all(ch.isalnum() or ch == "-" for ch in value):
            raise InvalidTagFormatError()
        return super().__new__(cls, value)


class TagGroup:
    """A set of distinct tags parsed from a comma separated string."""

    MAX_NUM = TAG_MAX_NUM

    def __init__(self, tags: str) -> None:
        parsed = dict.fromkeys(Tag(part.strip()) for part in str(tags).split(","))
        if len(parsed) > self.MAX_NUM:
            raise TagTooManyError()
        self._tags: tuple[Tag, ...] = tuple(parsed)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, item: object) -> bool:
        return item in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagGroup):
            return NotImplemented
        return set(self._tags) == set(other._tags)

    def __hash__(self) -> int:
        return hash(frozenset(self._tags))

    def __repr__(self) -> str:
        return f"TagGroup({','.join(self._tags)!r})"

    def to_list(self) -> list[str]:
        """Return the tags as plain strings."""
        return [str(tag) for tag in self._tags]