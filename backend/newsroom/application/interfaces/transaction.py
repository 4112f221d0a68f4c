"""Transaction handle port — groups several repository writes atomically."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType

from .article_repository import ArticleRepository
from .thumbnail_repository import ThumbnailRepository


class TransactionHandle(ABC):
    """An open, uncommitted database transaction.

    Acquire it with ``async with factory() as tx:``. Repositories reached
    through ``tx`` write inside the transaction. Nothing is persisted until
    ``commit()``; an exception escaping the block rolls back. ``release()``
    runs exactly once when the block exits, on every path.
    """

    thumbnails: ThumbnailRepository
    articles: ArticleRepository

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...

    @abstractmethod
    async def release(self) -> None:
        """Return the underlying connection."""
        ...

    async def __aenter__(self) -> "TransactionHandle":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
        finally:
            await self.release()


TransactionFactory = Callable[[], TransactionHandle]
