from .article_repository import SQLAlchemyArticleRepository
from .category_repository import SQLAlchemyCategoryRepository
from .thumbnail_repository import SQLAlchemyThumbnailRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyThumbnailRepository",
    "SQLAlchemyUserRepository",
]
