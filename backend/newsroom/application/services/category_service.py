"""Application service for Category operations."""

from newsroom.application.interfaces import CategoryRepository
from newsroom.domain.entities import Category
from newsroom.domain.exceptions import DuplicateEntityError


class CategoryService:

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def list_categories(self) -> list[Category]:
        return await self._repository.get_all()

    async def create_category(self, name: str) -> Category:
        name = name.strip()
        if not name:
            raise ValueError("Category name is empty")
        if await self._repository.get_by_name(name) is not None:
            raise DuplicateEntityError("Category", "name", name)
        return await self._repository.create(Category(name=name))
