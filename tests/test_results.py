import json

from bloglite.results import (
    ArticleForAdminResult,
    ArticleListResult,
    ArticleMetaResult,
    ArticleWithContentResult,
    CategoryResult,
    ItemsResult,
    items_result,
)

META_KEYS = ["slug", "title", "summary", "author", "tags", "category", "created_at", "updated_at"]


def _meta(slug="hello"):
    return ArticleMetaResult(
        slug=slug,
        title="Hello",
        summary="<p>Short</p>",
        author="于野",
        tags=["python", "web"],
        category=CategoryResult(id="tech", name="Tech"),
        created_at=1000,
        updated_at=2000,
    )


def test_meta_to_dict():
    data = _meta().to_dict()
    assert list(data) == META_KEYS
    assert data["category"] == {"id": "tech", "name": "Tech"}
    assert data["tags"] == ["python", "web"]
    assert data["created_at"] == 1000


def test_with_content_is_flattened():
    data = ArticleWithContentResult(parent=_meta(), content="<p>Body</p>", version="v1").to_dict()
    assert list(data) == META_KEYS + ["content", "version"]
    assert data["content"] == "<p>Body</p>"
    assert data["version"] == "v1"
    assert data["slug"] == "hello"


def test_admin_result_is_flattened_with_id_first():
    data = ArticleForAdminResult(id="abc", parent=_meta(), state=-1, version="v2").to_dict()
    assert list(data) == ["id"] + META_KEYS + ["state", "version"]
    assert data["state"] == -1


def test_list_result_serializes_items():
    items = [_meta("a"), _meta("b")]
    result = ArticleListResult(count=len(items), total=10, page=1, limit=13, items=items)
    data = result.to_dict()
    assert [item["slug"] for item in data["items"]] == ["a", "b"]
    assert data["count"] == 2
    assert data["total"] == 10
    assert json.loads(json.dumps(data, ensure_ascii=False)) == data


def test_items_result_counts():
    result = items_result(tag for tag in ["rust", "python", "go"])
    assert result.total == 3
    assert result.items == ["rust", "python", "go"]
    assert result.to_dict() == {"total": 3, "items": ["rust", "python", "go"]}


def test_items_result_empty():
    result = items_result([])
    assert result == ItemsResult(total=0, items=[])


def test_items_result_of_categories():
    result = items_result([CategoryResult("tech", "Tech")])
    assert result.to_dict()["items"] == [{"id": "tech", "name": "Tech"}]