"""Abstract repository interface (port) for user accounts."""

from abc import ABC, abstractmethod

from newsroom.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence. Emails are matched after normalization."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...
