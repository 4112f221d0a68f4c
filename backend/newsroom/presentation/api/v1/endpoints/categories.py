"""Category endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from newsroom.application.schemas import CategoryCreate, CategoryResponse
from newsroom.application.services import CategoryService
from newsroom.domain.entities import Requester
from newsroom.domain.exceptions import DuplicateEntityError
from newsroom.infrastructure.dependencies import get_category_service, get_current_admin

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    categories = await service.list_categories()
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    _: Requester = Depends(get_current_admin),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category; names must be unique."""
    try:
        category = await service.create_category(data.name)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)
