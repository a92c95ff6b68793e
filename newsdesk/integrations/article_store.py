"""Article storage collaborator contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from newsdesk.schemas.article import StoredArticle


@runtime_checkable
class ArticleStore(Protocol):
    """Persists article bodies; content comes back unchanged on load."""

    async def save_article(
        self,
        *,
        content: str,
        category: str,
        tags: list[str],
    ) -> StoredArticle:
        """Store an article body with its category and tags."""

    async def load_article(self, article_id: str) -> StoredArticle | None:
        """Return the stored article, or None when it does not exist."""
