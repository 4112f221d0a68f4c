"""Article endpoints — creation (admin only) and public reads."""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import JSONResponse

from newsroom.application.schemas import ArticleCreate, ArticleResponse, ArticleWithLinkCreate
from newsroom.application.services import ArticleService
from newsroom.domain.entities import Article, Requester
from newsroom.domain.exceptions import DomainError
from newsroom.infrastructure.dependencies import get_article_service, get_current_admin
from newsroom.infrastructure.storage.thumbnail_storage import UploadedImage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse(
        id=article.id,
        title=article.title,
        content=article.content,
        link=article.link,
        user_id=article.user_id,
        category_id=article.category_id,
        thumbnail_id=article.thumbnail_id,
        created_at=article.created_at,
        date=ArticleService.filter_date(article.created_at),
    )


def _failure(e: Exception) -> JSONResponse:
    if not isinstance(e, DomainError):
        logger.exception("Article creation failed")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Unable to create the article.", "error": str(e)},
    )


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve a paginated list of articles, newest first."""
    articles = await service.list_articles(skip=skip, limit=limit)
    return [_to_response(a) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    article = await service.find_one_by_id(article_id)
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return _to_response(article)


@router.post("/link", status_code=status.HTTP_201_CREATED)
async def create_article_with_link(
    data: ArticleWithLinkCreate,
    requester: Requester = Depends(get_current_admin),
    service: ArticleService = Depends(get_article_service),
) -> JSONResponse:
    """Create an article around an external link with an existing thumbnail path."""
    try:
        created = await service.create_article_with_link(data, requester)
    except Exception as e:
        return _failure(e)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"message": "Article created.", "data": created},
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_article(
    title: str = Form(...),
    category: str = Form(...),
    content: str = Form(""),
    link: str | None = Form(None),
    thumbnail: UploadFile | None = File(None),
    requester: Requester = Depends(get_current_admin),
    service: ArticleService = Depends(get_article_service),
) -> JSONResponse:
    """Create an article from a multipart form with an optional thumbnail upload."""
    try:
        data = ArticleCreate(title=title, category=category, content=content, link=link)

        image = None
        if thumbnail is not None and thumbnail.filename:
            image = UploadedImage(filename=thumbnail.filename, content=await thumbnail.read())

        article = await service.create_article(data, image, requester)
    except Exception as e:
        return _failure(e)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "message": "Article created.",
            "data": _to_response(article).model_dump(mode="json"),
        },
    )
