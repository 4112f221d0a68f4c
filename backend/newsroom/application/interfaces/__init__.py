from .article_repository import ArticleRepository
from .category_repository import CategoryRepository
from .thumbnail_repository import ThumbnailRepository
from .user_repository import UserRepository
from .transaction import TransactionFactory, TransactionHandle

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "ThumbnailRepository",
    "UserRepository",
    "TransactionFactory",
    "TransactionHandle",
]
