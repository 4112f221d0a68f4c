"""Application service (use case) for Article operations."""

import logging
from datetime import date

from newsroom.application.interfaces import (
    ArticleRepository,
    CategoryRepository,
    TransactionFactory,
    TransactionHandle,
    UserRepository,
)
from newsroom.application.schemas import ArticleCreate, ArticleWithLinkCreate
from newsroom.domain.entities import Article, ArticleDraft, Category, Requester, Thumbnail, User
from newsroom.domain.exceptions import EntityNotFoundError
from newsroom.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage
from newsroom.infrastructure.storage.thumbnail_storage import LocalThumbnailStorage, UploadedImage

logger = logging.getLogger(__name__)
plog = PipelineLogger("ArticleService")


class ArticleService:
    """Orchestrates article creation and lookup.

    Lookups go through the request-scoped repositories. Thumbnail and
    article rows are written together through a transaction handle taken
    from ``transaction_factory``, so either both land or neither does.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
        thumbnail_storage: LocalThumbnailStorage,
        transaction_factory: TransactionFactory,
    ):
        self._repository = repository
        self._users = user_repository
        self._categories = category_repository
        self._storage = thumbnail_storage
        self._transaction_factory = transaction_factory

    # ── Thumbnails ───────────────────────────────────────────────────

    async def save_thumbnail_image(self, file: UploadedImage) -> str:
        """Write an uploaded image under the thumbnail directory and return its path."""
        plog.step_start(PipelineStage.THUMBNAIL, f"Storing '{file.filename}'", size_bytes=len(file.content))
        path = await self._storage.store_image(file.content, file.filename)
        plog.step_complete(PipelineStage.THUMBNAIL, "Stored image", path=path)
        return path

    async def create_thumbnail(self, path: str, tx: TransactionHandle) -> Thumbnail:
        """Insert a thumbnail record inside an already-open transaction."""
        return await tx.thumbnails.create(Thumbnail(path=path))

    # ── Lookups ──────────────────────────────────────────────────────

    async def find_category_by_name(self, name: str) -> Category | None:
        return await self._categories.get_by_name(name)

    async def find_one_by_id(self, article_id: int) -> Article | None:
        return await self._repository.get_by_id(article_id)

    async def list_articles(self, skip: int = 0, limit: int = 100) -> list[Article]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def _resolve_author(self, requester: Requester) -> User:
        user = await self._users.get_by_email(requester.email)
        if user is None:
            raise EntityNotFoundError("User", requester.email)
        return user

    async def _resolve_category(self, name: str) -> Category:
        category = await self.find_category_by_name(name)
        if category is None:
            raise EntityNotFoundError("Category", name)
        return category

    # ── Writes ───────────────────────────────────────────────────────

    async def save_article(self, draft: ArticleDraft, tx: TransactionHandle) -> Article:
        """Insert an article record inside an already-open transaction."""
        plog.step_start(PipelineStage.ARTICLE, "Inserting article", title=draft.title)
        article = await tx.articles.create(draft.to_article())
        plog.step_complete(PipelineStage.ARTICLE, "Article staged", article_id=article.id)
        return article

    async def create_article_with_link(
        self, data: ArticleWithLinkCreate, requester: Requester
    ) -> bool:
        """Create an article around an external link, reusing an existing thumbnail path.

        Returns True once the thumbnail and article rows are committed.
        Any failure inside the transaction rolls both back and propagates.
        """
        plog.separator(f"Link article: {data.title}")

        with plog.timed_step(PipelineStage.LOOKUP, "Resolving author and category"):
            user = await self._resolve_author(requester)
            category = await self._resolve_category(data.category)

        async with self._transaction_factory() as tx:
            thumbnail = await self.create_thumbnail(data.thumbnail, tx)
            draft = ArticleDraft(
                user_id=user.id,
                title=data.title,
                content=data.content,
                link=data.link,
                category_id=category.id,
                thumbnail_id=thumbnail.id,
            )
            article = await self.save_article(draft, tx)
            await tx.commit()

        plog.step_complete(
            PipelineStage.COMPLETE, "Article committed",
            article_id=article.id, thumbnail_id=thumbnail.id,
        )
        return True

    async def create_article(
        self,
        data: ArticleCreate,
        thumbnail_file: UploadedImage | None,
        requester: Requester,
    ) -> Article:
        """Create an article from a form post, storing the uploaded thumbnail first.

        If the transaction fails after the image was written, the image is
        removed again so no orphaned file remains.
        """
        plog.separator(f"Article: {data.title}")

        with plog.timed_step(PipelineStage.LOOKUP, "Resolving author and category"):
            user = await self._resolve_author(requester)
            category = await self._resolve_category(data.category)

        thumbnail_path = None
        if thumbnail_file is not None:
            thumbnail_path = await self.save_thumbnail_image(thumbnail_file)

        try:
            async with self._transaction_factory() as tx:
                thumbnail_id = None
                if thumbnail_path is not None:
                    thumbnail = await self.create_thumbnail(thumbnail_path, tx)
                    thumbnail_id = thumbnail.id
                draft = ArticleDraft(
                    user_id=user.id,
                    title=data.title,
                    content=data.content,
                    link=data.link,
                    category_id=category.id,
                    thumbnail_id=thumbnail_id,
                )
                article = await self.save_article(draft, tx)
                await tx.commit()
        except Exception as exc:
            plog.step_error(PipelineStage.TRANSACTION, "Article transaction failed", error=exc)
            if thumbnail_path is not None:
                await self._storage.delete_image(thumbnail_path)
            raise

        plog.step_complete(PipelineStage.COMPLETE, "Article committed", article_id=article.id)
        return article

    # ── Formatting ───────────────────────────────────────────────────

    @staticmethod
    def filter_date(value: date) -> str:
        """Format a date as ``YYYY.MM.DD``."""
        return f"{value.year}.{value.month:02d}.{value.day:02d}"
