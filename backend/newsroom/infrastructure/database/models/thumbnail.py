"""SQLAlchemy ORM model for the Thumbnail entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.infrastructure.database.base import Base


class ThumbnailModel(Base):
    """ORM model — maps to the 'thumbnails' table."""

    __tablename__ = "thumbnails"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    path: Mapped[str] = mapped_column(String(1024), nullable=False)

    def __repr__(self) -> str:
        return f"<ThumbnailModel(id={self.id}, path='{self.path}')>"
