"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.interfaces import ArticleRepository
from newsroom.domain.entities import Article
from newsroom.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        created_at = model.created_at
        # SQLite drops tzinfo; stored values are UTC
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            link=model.link,
            user_id=model.user_id,
            category_id=model.category_id,
            thumbnail_id=model.thumbnail_id,
            created_at=created_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            link=entity.link,
            user_id=entity.user_id,
            category_id=entity.category_id,
            thumbnail_id=entity.thumbnail_id,
            created_at=entity.created_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
