"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating an article from a multipart form with an uploaded thumbnail."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Release notes"])
    category: str = Field(..., min_length=1, max_length=100, examples=["news"])
    content: str = Field("", examples=["Body of the article."])
    link: str | None = Field(None, max_length=2048)


class ArticleWithLinkCreate(BaseModel):
    """Schema for creating an article that centers on an external link.

    ``thumbnail`` is an already-available path or URL, not an upload.
    """

    title: str = Field(..., min_length=1, max_length=255, examples=["Worth reading"])
    link: str = Field(..., min_length=1, max_length=2048, examples=["https://example.com/post"])
    category: str = Field(..., min_length=1, max_length=100, examples=["news"])
    thumbnail: str = Field(..., min_length=1, max_length=1024, examples=["uploads/thumbnail/post.jpg"])
    content: str = Field("", examples=["Why this link matters."])


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    link: str | None
    user_id: int
    category_id: int
    thumbnail_id: int | None
    created_at: datetime
    date: str

    model_config = {"from_attributes": True}
