"""User registration endpoint."""

from fastapi import APIRouter, Depends, status

from fanclub.api.deps import get_auth_service
from fanclub.schemas.auth import SignUpRequest, SignUpResponse
from fanclub.services.auth import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
    description="Create a new account. Does not sign the user in.",
    responses={
        400: {"description": "Field-scoped validation errors"},
        409: {"description": "Email and/or username already registered"},
    },
)
async def register(
    data: SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> SignUpResponse:
    await auth_service.register(data)
    return SignUpResponse()
