"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.config import get_settings
from newsroom.application.services import ArticleService, AuthService, CategoryService
from newsroom.domain.entities import Requester
from newsroom.domain.exceptions import AuthenticationError
from newsroom.infrastructure.database.session import async_session_factory, get_db_session
from newsroom.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyUserRepository,
)
from newsroom.infrastructure.database.transaction import make_transaction_factory
from newsroom.infrastructure.security.token_signer import TokenSigner
from newsroom.infrastructure.storage.thumbnail_storage import LocalThumbnailStorage


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with lookups on the request session.

    Writes go through a separate transaction opened per creation.
    """
    settings = get_settings()
    yield ArticleService(
        repository=SQLAlchemyArticleRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
        category_repository=SQLAlchemyCategoryRepository(session),
        thumbnail_storage=LocalThumbnailStorage(upload_dir=settings.upload_dir),
        transaction_factory=make_transaction_factory(async_session_factory),
    )


async def get_category_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CategoryService, None]:
    """Provides a CategoryService instance with its repository wired up."""
    yield CategoryService(SQLAlchemyCategoryRepository(session))


def get_token_signer() -> TokenSigner:
    settings = get_settings()
    return TokenSigner(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    signer: TokenSigner = Depends(get_token_signer),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService bound to the users table and the token signer."""
    yield AuthService(SQLAlchemyUserRepository(session), signer)


# ── Bearer authentication ───────────────────────────────────────────

def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    scheme = parts[0].strip().lower()
    token = parts[1].strip() if len(parts) == 2 else ""
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def get_current_requester(
    authorization: str | None = Header(default=None),
    service: AuthService = Depends(get_auth_service),
) -> Requester:
    token = _extract_bearer_token(authorization)
    try:
        return await service.get_requester(token)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


async def get_current_admin(
    requester: Requester = Depends(get_current_requester),
) -> Requester:
    if not requester.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator privileges required.",
        )
    return requester
