"""Article storage schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleContentPayload(BaseModel):
    """Body and metadata handed to the article store on save."""

    content: str
    category: str
    tags: list[str] = Field(default_factory=list)


class StoredArticle(BaseModel):
    """Article as returned by the article store."""

    id: str
    content: str
    category: str
    tags: list[str] = Field(default_factory=list)
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
