"""Custom exception classes for the content codec and its collaborators."""

from typing import Any


class NewsdeskError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Codec Errors
class ContentCodecError(NewsdeskError):
    """Base class for block codec errors."""

    pass


class HtmlParserUnavailableError(ContentCodecError):
    """The HTML tree builder needed for parsing is not installed.

    Distinct from an empty parse, which returns no blocks.
    """

    def __init__(self, parser_name: str) -> None:
        super().__init__(
            f"HTML parser '{parser_name}' is not available in this environment",
            details={"parser": parser_name},
        )


class BlockPayloadError(ContentCodecError):
    """Stored block JSON is not a JSON array."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid block payload: {message}")


# Collaborator Errors
class ArticleStoreError(NewsdeskError):
    """The article storage collaborator failed."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(
            f"Article store {operation} failed: {message}",
            details={"operation": operation},
        )


class ArticleNotFoundError(ArticleStoreError):
    """Article not found in storage."""

    def __init__(self, article_id: str) -> None:
        super().__init__("load", f"article not found: {article_id}")


class BlobStoreError(NewsdeskError):
    """The blob storage collaborator failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Blob store upload failed: {message}")


class UnsupportedContentTypeError(BlobStoreError):
    """Upload content type is not an image."""

    def __init__(self, content_type: str) -> None:
        NewsdeskError.__init__(
            self,
            f"Unsupported content type for image block: {content_type}",
            details={"content_type": content_type},
        )
