from .article_service import ArticleService
from .auth_service import AuthService
from .category_service import CategoryService

__all__ = [
    "ArticleService",
    "AuthService",
    "CategoryService",
]
