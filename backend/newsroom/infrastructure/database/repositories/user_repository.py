"""SQLAlchemy implementation of the UserRepository port."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.interfaces import UserRepository
from newsroom.domain.entities import User
from newsroom.infrastructure.database.models import UserModel


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            roles=list(model.roles or []),
            created_at=model.created_at,
        )

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == normalize_email(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            email=normalize_email(user.email),
            password_hash=user.password_hash,
            roles=list(user.roles),
            created_at=user.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
