from .article import ArticleCreate, ArticleWithLinkCreate, ArticleResponse
from .auth import AdminSignInRequest, AdminSignUpRequest, UserResponse
from .category import CategoryCreate, CategoryResponse

__all__ = [
    "ArticleCreate",
    "ArticleWithLinkCreate",
    "ArticleResponse",
    "AdminSignInRequest",
    "AdminSignUpRequest",
    "UserResponse",
    "CategoryCreate",
    "CategoryResponse",
]
