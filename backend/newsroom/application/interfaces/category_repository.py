"""Abstract repository interface (port) for categories."""

from abc import ABC, abstractmethod

from newsroom.domain.entities import Category


class CategoryRepository(ABC):
    """Port for category persistence — lookups are exact-match on name."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Category | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Category]:
        ...

    @abstractmethod
    async def create(self, category: Category) -> Category:
        ...
