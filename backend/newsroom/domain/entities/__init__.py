from .article import Article, ArticleDraft
from .category import Category
from .thumbnail import Thumbnail
from .user import ROLE_ADMIN, Requester, User

__all__ = [
    "Article",
    "ArticleDraft",
    "Category",
    "Thumbnail",
    "User",
    "Requester",
    "ROLE_ADMIN",
]
