from .article import ArticleModel
from .category import CategoryModel
from .thumbnail import ThumbnailModel
from .user import UserModel

__all__ = [
    "ArticleModel",
    "CategoryModel",
    "ThumbnailModel",
    "UserModel",
]
