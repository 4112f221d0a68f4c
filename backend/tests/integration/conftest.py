"""Shared fixtures: a throwaway SQLite database wired into a fresh app."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from newsroom.application.services import ArticleService
from newsroom.infrastructure.database import Base, get_db_session
from newsroom.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyUserRepository,
)
from newsroom.infrastructure.database.transaction import make_transaction_factory
from newsroom.infrastructure.dependencies import get_article_service, get_token_signer
from newsroom.infrastructure.security.token_signer import TokenSigner
from newsroom.infrastructure.storage.thumbnail_storage import LocalThumbnailStorage
from newsroom.main import create_app


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()


@pytest.fixture
def upload_dir(tmp_path) -> str:
    return str(tmp_path / "uploads")


@pytest.fixture
def test_app(session_factory, upload_dir):
    app = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def override_article_service(
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[ArticleService, None]:
        yield ArticleService(
            repository=SQLAlchemyArticleRepository(session),
            user_repository=SQLAlchemyUserRepository(session),
            category_repository=SQLAlchemyCategoryRepository(session),
            thumbnail_storage=LocalThumbnailStorage(upload_dir=upload_dir),
            transaction_factory=make_transaction_factory(session_factory),
        )

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_article_service] = override_article_service
    app.dependency_overrides[get_token_signer] = lambda: TokenSigner(secret="integration-secret")
    return app
