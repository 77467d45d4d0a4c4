# bloglite

This is the domain core of a small blog engine. It provides the article aggregate,
validation of markdown content fields, a content version history, domain events
and read-model result shapes. You supply parsing, hashing, rendering and storage
by implementing small abstract classes.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `bloglite.errors` holds the exception hierarchy. Every domain failure derives
  from `ArticleError`, and the errors fall into three branches:
  - `ContentError` covers `MissingFieldError`, `EmptyFieldError`,
    `TitleTooLongError`, `TagTooManyError`, `ParseError` and the other content
    errors.
  - `VersionError` covers `EmptyHashValueError`, `DuplicateVersionError` and
    `VersionNotFoundError`.
  - The article errors are `ArticleSlugFormatError`, `ArticleIdFormatError`,
    `InvalidCategoryError`, `ArticleDeletedError` and others.
- `bloglite.validators` provides the validated string types `Title`, `Summary`
  and `Body`, plus `Tag` and `TagGroup`:
  - `Title` is non-empty and at most 800 UTF-8 bytes.
  - `Summary` is non-empty and at most 1 KiB.
  - `Body` is at most 2 MiB.
  - A `Tag` is letters, digits and `-`, at most 20 bytes.
  - A `TagGroup` parses a comma separated string, trims and de-duplicates the
    tags, and allows at most four.
- `bloglite.content` provides `ContentFactory`, which turns a raw document into
  a `Content`. It uses a `ContentParser`, a `ContentHasher` and an async
  `ContentRender`, which are the abstract classes you implement. The front
  matter must contain `title` and `summary`. The `tags` field is optional.
- `bloglite.version` provides `Version` and `VersionHistory`. A
  `VersionHistory` is a tree of content hashes. It supports
  `add_version`, `rollback_to_version` and `is_exist`.
- `bloglite.articles` holds the `Article` aggregate together with
  `ArticleBuilder` and `article_from_repository`. It also defines the value
  objects `ArticleSlug`, `ArticleId` (ULID), `ArticleCategory` and
  `ArticleAuthor`, and the enum `ArticleState`: `DELETED` is -1, `PRIVATE` is 0
  and `PUBLIC` is 1. These operations return domain events:
  - `public()` and `private()` return a new article along with the event.
  - `update_content()`, `revert_to_version()`, `change_article_category()` and
    `delete()` change the article in place.
- `bloglite.events` holds the domain events. They are `ArticleCreated`,
  `ArticleContentUpdated`, `ArticleContentReverted`, `ArticleCategoryChanged`,
  `ArticleStateChanged` and `ArticleDeleted`. Each one has a fixed `TOPIC` and
  supports `to_dict`, `to_json`, `from_dict` and `from_json`.
- `bloglite.repository` contains three pieces:
  - `ArticleRepository` is the abstract async store you implement, with
    `find`, `find_by_slug` and `save_all`.
  - `Event` pairs a topic with a JSON message in bytes.
  - `to_event()` wraps a domain event as an `Event`.
- `bloglite.categories` provides `Category` and the abstract
  `CategoryRepository`.
- `bloglite.results` holds the read-model shapes. They are `CategoryResult`,
  `ArticleMetaResult`, `ArticleWithContentResult`, `ArticleForAdminResult`,
  `ArticleListResult` and `ItemsResult`, and each has `to_dict()`.
  `items_result()` wraps an iterable together with its count.
- `bloglite.config` provides `AuthConfig`, `config_path()` and
  `write_auth_config(token, path=None)`:
  - `config_path()` returns `~/.bloglite/auth.toml`.
  - `write_auth_config` writes the token and the package version as TOML,
    creates any missing directories, and returns the path it wrote.

## Example

```python
import asyncio
import hashlib

from bloglite.articles import ArticleBuilder
from bloglite.content import ContentFactory, ContentHasher, ContentParser, ContentRender
from bloglite.repository import to_event


class Parser(ContentParser):
    def parse(self, raw):
        head, _, body = raw.partition("\n---\n")
        fields = dict(line.split(": ", 1) for line in head.splitlines() if ": " in line)
        return fields, body


class Hasher(ContentHasher):
    def hash(self, frontmatter, body):
        return hashlib.sha256((frontmatter.title + body).encode()).hexdigest()


class Render(ContentRender):
    async def render(self, content):
        return f"<p>{content}</p>"


raw = "title: Hello\nsummary: First post\ntags: intro,news\n---\nHello, world."
content = asyncio.run(ContentFactory(Parser(), Hasher(), Render()).process(raw))

article, created = (
    ArticleBuilder()
    .slug("hello-world")
    .author("someone")
    .category("general", True)
    .content(content)
    .build()
)
article, changed = article.public()
print(created.TOPIC, created.to_json())
print(to_event(changed))
```

`ArticleBuilder.build()` raises `InvalidCategoryError` when the category was not
marked as valid. It raises `ValueError` when slug, author, category or content
was never set.

## What this package does not do

This package does not include the following:

- an HTTP server or API routes
- authentication or token signing
- a database-backed store
- a markdown parser or renderer
- handlers that put the domain operations together into request-level commands
- a mapping of errors to API error codes

Storage and rendering come from your own implementations of the abstract classes
above.

## Tests

```
pytest
```