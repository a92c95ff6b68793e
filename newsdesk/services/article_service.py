"""Bridge between the block codec and the storage collaborators."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from newsdesk.config import Settings, settings
from newsdesk.core.exceptions import (
    ArticleNotFoundError,
    ArticleStoreError,
    BlobStoreError,
    UnsupportedContentTypeError,
)
from newsdesk.integrations.article_store import ArticleStore
from newsdesk.integrations.blob_store import BlobStore
from newsdesk.schemas.article import ArticleContentPayload, StoredArticle
from newsdesk.schemas.blocks import ContentBlock, ImageBlock
from newsdesk.services.block_editor import update_block_fields
from newsdesk.services.content_parser import parse_html_to_blocks
from newsdesk.services.content_renderer import render_blocks_to_html

logger = logging.getLogger(__name__)


class ArticleContentService:
    """Save, reload and attach images to block-based article bodies."""

    def __init__(
        self,
        article_store: ArticleStore,
        blob_store: BlobStore | None = None,
        app_settings: Settings | None = None,
    ) -> None:
        self.article_store = article_store
        self.blob_store = blob_store
        self.settings = app_settings or settings

    async def save_blocks(
        self,
        blocks: Sequence[ContentBlock],
        *,
        category: str,
        tags: list[str] | None = None,
    ) -> StoredArticle:
        """Render blocks to HTML and store the result as the article body."""
        payload = ArticleContentPayload(
            content=render_blocks_to_html(blocks),
            category=category,
            tags=tags or [],
        )
        logger.info(
            "Saving article body",
            extra={"blocks": len(blocks), "category": category, "content_length": len(payload.content)},
        )
        try:
            return await self.article_store.save_article(
                content=payload.content,
                category=payload.category,
                tags=payload.tags,
            )
        except ArticleStoreError:
            raise
        except Exception as e:
            logger.warning("Article store save failed", extra={"error": str(e)})
            raise ArticleStoreError("save", str(e)) from e

    async def load_blocks(self, article_id: str) -> list[ContentBlock]:
        """Load a stored article body and parse it back into editable blocks."""
        try:
            article = await self.article_store.load_article(article_id)
        except ArticleStoreError:
            raise
        except Exception as e:
            logger.warning("Article store load failed", extra={"article_id": article_id, "error": str(e)})
            raise ArticleStoreError("load", str(e)) from e

        if article is None:
            raise ArticleNotFoundError(article_id)

        blocks = parse_html_to_blocks(article.content, app_settings=self.settings)
        logger.info("Loaded article body", extra={"article_id": article_id, "blocks": len(blocks)})
        return blocks

    async def attach_image(
        self,
        blocks: Sequence[ContentBlock],
        block_id: str,
        *,
        payload: bytes,
        content_type: str,
    ) -> list[ContentBlock]:
        """Upload image bytes and point the image block ``block_id`` at the new URL."""
        if self.blob_store is None:
            raise BlobStoreError("no blob store configured")
        if not content_type.lower().startswith("image/"):
            raise UnsupportedContentTypeError(content_type)

        target = next((block for block in blocks if block.id == block_id), None)
        if not isinstance(target, ImageBlock):
            logger.debug("Image upload target is not an image block", extra={"block_id": block_id})
            return list(blocks)

        try:
            url = await self.blob_store.upload(payload=payload, content_type=content_type)
        except BlobStoreError:
            raise
        except Exception as e:
            logger.warning("Blob upload failed", extra={"content_type": content_type, "error": str(e)})
            raise BlobStoreError(str(e)) from e

        logger.info("Uploaded image", extra={"block_id": block_id, "byte_size": len(payload)})
        return update_block_fields(blocks, block_id, url=url)
