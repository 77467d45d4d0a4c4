"""Errors raised by the article domain."""

from __future__ import annotations

TITLE_MAX_LENGTH = 800
SUMMARY_MAX_LENGTH = 1024
BODY_MAX_LENGTH = 2 * 1024 * 1024
TAG_MAX_LENGTH = 20
TAG_MAX_NUM = 4


class ArticleError(Exception):
    """Base class of every article domain error."""

    default_message = "文章操作失败"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    @property
    def message(self) -> str:
        return self.args[0]


# -- content errors


class ContentError(ArticleError):
    """The article document or one of its fields is invalid."""

    default_message = "文章内容无效"


class MissingFieldError(ContentError):
    """A required front matter field is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"缺少必要字段：'{field}'，请检查文档完整性")


class EmptyFieldError(ContentError):
    """A required field is present but empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"字段'{field}'内容为空，请输入有效内容")


class BodyTooLongError(ContentError):
    default_message = (
        f"正文大小超过限制（最大{BODY_MAX_LENGTH // 1024 // 1024}MB），请精简内容或拆分文档"
    )


class SummaryTooLongError(ContentError):
    default_message = f"摘要长度超过限制（最大{SUMMARY_MAX_LENGTH // 1024}KB），请精简要点描述"


class TitleTooLongError(ContentError):
    default_message = f"标题过长（最大{TITLE_MAX_LENGTH}字节），请保持标题简洁"


class TagTooLongError(ContentError):
    default_message = f"单个标签长度超过限制（最大{TAG_MAX_LENGTH}字节），请缩短描述"


class TagTooManyError(ContentError):
    default_message = f"标签数量超过限制（最多{TAG_MAX_NUM}个），请删除非必要标签"


class InvalidTagFormatError(ContentError):
    default_message = "标签格式错误，只允许字母、数字和中划线(-)"


class ParseError(ContentError):
    """The raw document could not be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("文档解析失败，请检查格式是否符合要求")


class HashingError(ContentError):
    """The content hash could not be computed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("文件校验失败")


class RenderError(ContentError):
    """The content could not be rendered."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("内容生成失败")


# -- version errors


class VersionError(ArticleError):
    """An operation on the version history failed."""

    default_message = "版本操作失败"


class EmptyHashValueError(VersionError):
    default_message = "哈希值不能为空"


class DuplicateVersionError(VersionError):
    """The version hash already exists in the history."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"版本 '{version}' 已存在")


class VersionNotFoundError(VersionError):
    """The version hash is not part of the history."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"版本 '{version}' 不存在")


# -- article errors


class ArticleIdFormatError(ArticleError):
    default_message = "文章id格式无效"


class ArticleSlugFormatError(ArticleError):
    default_message = "文章slug格式无效"


class ArticleCategoryFormatError(ArticleError):
    default_message = "文章category格式无效"


class DuplicateArticleCategoryError(ArticleError):
    default_message = "无法重复分配相同的文章分类"


class ArticleStatusNoChangedError(ArticleError):
    default_message = "文章状态未发生变更"


class InvalidCategoryError(ArticleError):
    default_message = "未注册的分类"


class ArticleDeletedError(ArticleError):
    default_message = "文章已删除，不可操作"