"""Administrator sign-in and sign-up endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from newsroom.application.schemas import AdminSignInRequest, AdminSignUpRequest, UserResponse
from newsroom.application.services import AuthService
from newsroom.domain.exceptions import DomainError
from newsroom.infrastructure.dependencies import get_auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/admin/signin")
async def sign_in_admin(
    data: AdminSignInRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Sign in to the admin page; the token is returned in the Authorization header."""
    try:
        token = await service.verify_role_admin(data)
    except Exception as e:
        if not isinstance(e, DomainError):
            logger.exception("Admin sign-in failed")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": f"Unable to sign in to the admin page. {e}"},
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"message": "Signed in to the admin page."},
        headers={"Authorization": f"Bearer {token}"},
    )


@router.post("/admin/signup")
async def sign_up_admin(
    data: AdminSignUpRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Register a new administrator account."""
    try:
        admin = await service.sign_up_admin(data)
    except Exception as e:
        if not isinstance(e, DomainError):
            logger.exception("Admin sign-up failed")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Administrator sign-up is not possible.", "error": str(e)},
        )

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "message": "Signed up as an administrator.",
            "data": UserResponse.model_validate(admin, from_attributes=True).model_dump(mode="json"),
        },
    )
