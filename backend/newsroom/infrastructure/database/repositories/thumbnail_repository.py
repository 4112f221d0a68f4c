"""SQLAlchemy implementation of the ThumbnailRepository port."""

from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.application.interfaces import ThumbnailRepository
from newsroom.domain.entities import Thumbnail
from newsroom.infrastructure.database.models import ThumbnailModel


class SQLAlchemyThumbnailRepository(ThumbnailRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, thumbnail: Thumbnail) -> Thumbnail:
        model = ThumbnailModel(path=thumbnail.path)
        self._session.add(model)
        await self._session.flush()
        return Thumbnail(id=model.id, path=model.path)
