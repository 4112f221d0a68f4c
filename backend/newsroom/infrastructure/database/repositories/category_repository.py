"""SQLAlchemy implementation of the CategoryRepository port."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.interfaces import CategoryRepository
from newsroom.domain.entities import Category
from newsroom.infrastructure.database.models import CategoryModel


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Implements the CategoryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name, created_at=model.created_at)

    async def get_by_name(self, name: str) -> Category | None:
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Category]:
        result = await self._session.execute(select(CategoryModel).order_by(CategoryModel.name))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, category: Category) -> Category:
        model = CategoryModel(name=category.name, created_at=category.created_at)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
