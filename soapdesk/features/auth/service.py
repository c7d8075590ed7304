from typing import Optional
from soapdesk.features.auth.models import User
from soapdesk.features.auth.schemas import RegisterRequest, LoginRequest, UserResponse
from soapdesk.core.ownership import fetch_document
from soapdesk.core.security import (
    PROVIDER_TOKEN,
    verify_password,
    get_password_hash,
    create_access_token,
)
from soapdesk.shared.exceptions import CredentialsException, ConflictException
from soapdesk.core.logging import logger


class AuthService:
    """Authentication service for provider accounts."""

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(data={"sub": str(user.id), "type": PROVIDER_TOKEN})

    @staticmethod
    async def register(register_data: RegisterRequest) -> tuple[User, str]:
        """
        Create a provider account.

        Returns:
            tuple: (user, access_token)
        """
        existing_user = await User.find_one(User.email == register_data.email)
        if existing_user:
            raise ConflictException("Email already registered")

        user = User(
            email=register_data.email,
            password_hash=get_password_hash(register_data.password),
            name=register_data.name,
            credentials=register_data.credentials,
            license_number=register_data.license_number,
        )
        await user.insert()

        logger.info(f"Registered provider {user.email}")

        return user, AuthService.issue_token(user)

    @staticmethod
    async def login(login_data: LoginRequest) -> tuple[User, str]:
        """
        Authenticate a provider and return an access token.

        Returns:
            tuple: (user, access_token)
        """
        user = await User.find_one(User.email == login_data.email)
        if not user:
            raise CredentialsException("Invalid email or password")

        if not verify_password(login_data.password, user.password_hash):
            raise CredentialsException("Invalid email or password")

        if not user.is_active:
            raise CredentialsException("Account is inactive")

        logger.info(f"Provider {user.email} logged in")

        return user, AuthService.issue_token(user)

    @staticmethod
    async def get_user_by_id(user_id: str) -> Optional[User]:
        """Get user by ID."""
        return await fetch_document(User, user_id)

    @staticmethod
    def user_to_response(user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            email=user.email,
            name=user.name,
            credentials=user.credentials,
            license_number=user.license_number,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
