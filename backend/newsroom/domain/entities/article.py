"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Article:
    """Core domain entity representing a published article."""

    title: str
    user_id: int
    category_id: int
    content: str = ""
    link: str | None = None
    thumbnail_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ArticleDraft:
    """Fields gathered for a new article before it is written."""

    user_id: int
    title: str
    category_id: int
    content: str = ""
    link: str | None = None
    thumbnail_id: int | None = None

    def to_article(self) -> Article:
        return Article(
            title=self.title,
            content=self.content,
            link=self.link,
            user_id=self.user_id,
            category_id=self.category_id,
            thumbnail_id=self.thumbnail_id,
        )
