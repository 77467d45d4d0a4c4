import pytest

from bloglite.content import (
    Content,
    ContentFactory,
    ContentHasher,
    ContentParser,
    ContentRender,
)
from bloglite.errors import (
    BodyTooLongError,
    EmptyFieldError,
    HashingError,
    MissingFieldError,
    ParseError,
    RenderError,
)
from bloglite.validators import Body


class MockParser(ContentParser):
    def __init__(self, metadata, body):
        self.metadata = metadata
        self.body = body

    def parse(self, raw):
        return dict(self.metadata), self.body


class MockRender(ContentRender):
    async def render(self, content):
        return f"[RENDERED]{content}"


class MockHasher(ContentHasher):
    def hash(self, frontmatter, body):
        return "mock_hash"


class FailingHasher(ContentHasher):
    def hash(self, frontmatter, body):
        raise HashingError("测试")


class FailingRender(ContentRender):
    async def render(self, content):
        raise RenderError("测试")


class FailingParser(ContentParser):
    def parse(self, raw):
        raise ParseError("测试")


def sample_metadata():
    return {
        "title": "Test Title",
        "summary": "Test Summary",
        "tags": "rust,unit-test",
    }


@pytest.mark.asyncio
async def test_process_success():
    metadata = sample_metadata()
    factory = ContentFactory(MockParser(metadata, "Test Body"), MockHasher(), MockRender())

    content = await factory.process("dummy content")

    assert isinstance(content, Content)
    assert content.frontmatter.title == metadata["title"]
    assert content.rendered_body == "[RENDERED]Test Body"
    assert content.rendered_summary == "[RENDERED]Test Summary"
    assert content.hash == "mock_hash"
    assert set(content.frontmatter.tags.to_list()) == {"rust", "unit-test"}
    assert content.body == "Test Body"


@pytest.mark.asyncio
async def test_missing_title_field():
    metadata = sample_metadata()
    del metadata["title"]
    factory = ContentFactory(MockParser(metadata, "Test Body"), MockHasher(), MockRender())

    with pytest.raises(MissingFieldError) as info:
        await factory.process("")
    assert info.value.field == "title"


@pytest.mark.asyncio
async def test_missing_summary_field():
    metadata = sample_metadata()
    del metadata["summary"]
    factory = ContentFactory(MockParser(metadata, "Test Body"), MockHasher(), MockRender())

    with pytest.raises(MissingFieldError) as info:
        await factory.process("")
    assert info.value.field == "summary"


@pytest.mark.asyncio
async def test_empty_summary_field():
    metadata = sample_metadata()
    metadata["summary"] = ""
    factory = ContentFactory(MockParser(metadata, "Test Body"), MockHasher(), MockRender())

    with pytest.raises(EmptyFieldError) as info:
        await factory.process("")
    assert info.value.field == "summary"


@pytest.mark.asyncio
async def test_body_too_long():
    long_body = "a" * (Body.MAX_LENGTH + 1)
    factory = ContentFactory(
        MockParser(sample_metadata(), long_body), MockHasher(), MockRender()
    )

    with pytest.raises(BodyTooLongError):
        await factory.process("")


@pytest.mark.asyncio
async def test_fails_on_hashing_error():
    factory = ContentFactory(
        MockParser(sample_metadata(), "Test Body"), FailingHasher(), MockRender()
    )

    with pytest.raises(HashingError) as info:
        await factory.process("")
    assert info.value.reason == "测试"


@pytest.mark.asyncio
async def test_fails_on_rendering_error():
    factory = ContentFactory(
        MockParser(sample_metadata(), "Test Body"), MockHasher(), FailingRender()
    )

    with pytest.raises(RenderError) as info:
        await factory.process("")
    assert info.value.reason == "测试"


@pytest.mark.asyncio
async def test_fails_on_parsing_error():
    factory = ContentFactory(FailingParser(), MockHasher(), MockRender())

    with pytest.raises(ParseError) as info:
        await factory.process("dummy content")
    assert info.value.reason == "测试"