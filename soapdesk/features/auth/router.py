from fastapi import APIRouter, Depends, status
from soapdesk.features.auth.schemas import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserResponse,
)
from soapdesk.features.auth.service import AuthService
from soapdesk.features.auth.dependencies import get_current_user
from soapdesk.features.auth.models import User


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(register_data: RegisterRequest):
    """
    Register a new provider account.

    - **name**: Provider's full name
    - **email**: Provider's email address
    - **password**: Strong password (min 8 chars, 1 uppercase, 1 lowercase, 1 digit)
    """
    user, access_token = await AuthService.register(register_data)

    return TokenResponse(
        access_token=access_token,
        user=AuthService.user_to_response(user),
    )


@router.post("/login", response_model=TokenResponse)
async def login(login_data: LoginRequest):
    """
    Authenticate a provider and return an access token.

    - **email**: Provider's email address
    - **password**: Provider's password
    """
    user, access_token = await AuthService.login(login_data)

    return TokenResponse(
        access_token=access_token,
        user=AuthService.user_to_response(user),
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get the authenticated provider's account."""
    return AuthService.user_to_response(current_user)
