"""ArticleService transaction behaviour against a real SQLite database."""

import pytest
from sqlalchemy import func, select

from newsroom.application.schemas import ArticleWithLinkCreate
from newsroom.application.services import ArticleService
from newsroom.domain.entities import Requester
from newsroom.infrastructure.database.models import (
    ArticleModel,
    CategoryModel,
    ThumbnailModel,
    UserModel,
)
from newsroom.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyUserRepository,
)
from newsroom.infrastructure.database.transaction import SQLAlchemyTransaction
from newsroom.infrastructure.storage.thumbnail_storage import LocalThumbnailStorage

DTO = ArticleWithLinkCreate(
    title="Worth reading",
    link="https://example.com/post",
    category="news",
    thumbnail="uploads/thumbnail/post.jpg",
)
REQUESTER = Requester(id=1, email="editor@example.com", roles=["ADMIN"])


class CountingTransaction(SQLAlchemyTransaction):
    releases = 0

    async def release(self) -> None:
        CountingTransaction.releases += 1
        await super().release()


async def _seed(session_factory) -> None:
    async with session_factory() as session:
        session.add(UserModel(email="editor@example.com", password_hash="x", roles=["ADMIN"]))
        session.add(CategoryModel(name="news"))
        await session.commit()


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


def _service(session, session_factory, upload_dir) -> ArticleService:
    return ArticleService(
        repository=SQLAlchemyArticleRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
        category_repository=SQLAlchemyCategoryRepository(session),
        thumbnail_storage=LocalThumbnailStorage(upload_dir=upload_dir),
        transaction_factory=lambda: CountingTransaction(session_factory()),
    )


@pytest.mark.asyncio
async def test_commits_thumbnail_and_article(session_factory, upload_dir):
    await _seed(session_factory)
    CountingTransaction.releases = 0

    async with session_factory() as session:
        service = _service(session, session_factory, upload_dir)
        assert await service.create_article_with_link(DTO, REQUESTER) is True

    assert await _count(session_factory, ThumbnailModel) == 1
    assert await _count(session_factory, ArticleModel) == 1
    assert CountingTransaction.releases == 1


@pytest.mark.asyncio
async def test_failure_after_thumbnail_insert_leaves_no_rows(session_factory, upload_dir):
    await _seed(session_factory)
    CountingTransaction.releases = 0

    async def failing_save(draft, tx):
        raise RuntimeError("article insert failed")

    async with session_factory() as session:
        service = _service(session, session_factory, upload_dir)
        service.save_article = failing_save
        with pytest.raises(RuntimeError):
            await service.create_article_with_link(DTO, REQUESTER)

    assert await _count(session_factory, ThumbnailModel) == 0
    assert await _count(session_factory, ArticleModel) == 0
    assert CountingTransaction.releases == 1


@pytest.mark.asyncio
async def test_find_one_by_id_missing_returns_none(session_factory, upload_dir):
    async with session_factory() as session:
        service = _service(session, session_factory, upload_dir)
        assert await service.find_one_by_id(12345) is None
